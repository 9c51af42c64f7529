# tests/core/synthesis/test_tls.py
"""
Testes do pós-processamento TLS.

Os testes asseguram que:
- caminhos de certificado idênticos são gravados nos dois documentos
- as famílias de portas são disjuntas no legacy, com e sem TLS
- o dialeto current não remove portas seguras sem TLS (assimetria histórica)
- o CN permitido é propagado do engine ao proxy sem sobrescrever

Decisões arquiteturais:
    - A assimetria do current é verificada separadamente, não corrigida
"""

from tiflash_config.core.config.document import ConfigDocument
from tiflash_config.core.synthesis.dialect import CURRENT, LEGACY
from tiflash_config.core.synthesis.legacy import build_legacy_defaults
from tiflash_config.core.synthesis.current import build_current_defaults
from tiflash_config.core.synthesis.tls import apply_tls


SECURE = {"tcp_port_secure", "https_port"}
PLAIN = {"tcp_port", "http_port"}


def _legacy(topology, engine=None, proxy=None):
    e, p = build_legacy_defaults(engine or ConfigDocument(), proxy or ConfigDocument(), topology)
    return apply_tls(e, p, topology, LEGACY)


def _current(topology, engine=None, proxy=None):
    e, p = build_current_defaults(engine or ConfigDocument(), proxy or ConfigDocument(), topology)
    return apply_tls(e, p, topology, CURRENT)


def _present(doc, keys):
    return {k for k in keys if doc.get(k) is not None}


def test_legacy_tls_enabled_port_family(make_topology):
    engine, _ = _legacy(make_topology(tls_enabled=True))
    assert _present(engine, SECURE) == SECURE
    assert _present(engine, PLAIN) == set()


def test_legacy_tls_disabled_port_family(make_topology):
    engine, _ = _legacy(make_topology(tls_enabled=False))
    assert _present(engine, PLAIN) == PLAIN
    assert _present(engine, SECURE) == set()


def test_legacy_tls_disabled_removes_user_secure_ports(make_topology):
    engine, _ = _legacy(make_topology(), ConfigDocument({"https_port": 8443}))
    assert engine.get("https_port") is None


def test_current_tls_enabled_port_family(make_topology):
    engine, _ = _current(make_topology(version="v6.1.0", tls_enabled=True))
    assert engine.get("tcp_port_secure").as_int() == 9000
    assert engine.get("https_port").as_int() == 8123
    assert _present(engine, PLAIN) == set()


def test_current_tls_disabled_keeps_user_secure_ports(make_topology):
    """Sem TLS, o dialeto current não executa limpeza da família segura."""
    engine, _ = _current(
        make_topology(version="v6.1.0"),
        ConfigDocument({"https_port": 8443, "tcp_port_secure": 9440}),
    )
    assert engine.get("https_port").as_int() == 8443
    assert engine.get("tcp_port_secure").as_int() == 9440
    assert _present(engine, PLAIN) == PLAIN


def test_tls_secure_ports_user_values_win(make_topology):
    engine, _ = _legacy(make_topology(tls_enabled=True), ConfigDocument({"https_port": 8443}))
    assert engine.get("https_port").as_int() == 8443


def test_certificate_paths_on_both_documents(make_topology):
    for build, version in ((_legacy, "v5.3.0"), (_current, "v5.4.0")):
        engine, proxy = build(make_topology(version=version, tls_enabled=True))
        assert engine.get("security.ca_path").as_string() == "/var/lib/tiflash-tls/ca.crt"
        assert engine.get("security.cert_path").as_string() == "/var/lib/tiflash-tls/tls.crt"
        assert engine.get("security.key_path").as_string() == "/var/lib/tiflash-tls/tls.key"
        assert proxy.get("security.ca-path").as_string() == "/var/lib/tiflash-tls/ca.crt"
        assert proxy.get("security.cert-path").as_string() == "/var/lib/tiflash-tls/tls.crt"
        assert proxy.get("security.key-path").as_string() == "/var/lib/tiflash-tls/tls.key"


def test_certificate_paths_override_user_values(make_topology):
    engine, _ = _legacy(
        make_topology(tls_enabled=True),
        ConfigDocument({"security": {"ca_path": "/custom/ca.crt"}}),
    )
    assert engine.get("security.ca_path").as_string() == "/var/lib/tiflash-tls/ca.crt"


def test_allowed_cn_is_copied_to_proxy(make_topology):
    engine, proxy = _legacy(
        make_topology(tls_enabled=True),
        ConfigDocument({"security": {"cert_allowed_cn": ["tidb-client"]}}),
    )
    assert proxy.get("security.cert-allowed-cn").as_string_list() == ["tidb-client"]
    assert engine.get("security.cert_allowed_cn").as_string_list() == ["tidb-client"]


def test_allowed_cn_does_not_overwrite_proxy(make_topology):
    _, proxy = _current(
        make_topology(version="v6.1.0", tls_enabled=True),
        ConfigDocument({"security": {"cert_allowed_cn": ["engine-cn"]}}),
        ConfigDocument({"security": {"cert-allowed-cn": ["proxy-cn"]}}),
    )
    assert proxy.get("security.cert-allowed-cn").as_string_list() == ["proxy-cn"]


def test_allowed_cn_not_copied_without_tls(make_topology):
    _, proxy = _legacy(
        make_topology(),
        ConfigDocument({"security": {"cert_allowed_cn": ["tidb-client"]}}),
    )
    assert proxy.get("security.cert-allowed-cn") is None
    assert proxy.get("security.ca-path") is None
