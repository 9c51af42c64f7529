# src/tiflash_config/core/synthesis/tls.py
"""
Pós-processamento TLS do par de documentos (engine, proxy).

TLS habilitado:
    - caminhos de CA/certificado/chave sob `/var/lib/tiflash-tls` nos dois documentos
    - portas seguras (`tcp_port_secure`, `https_port`) se ausentes
    - remoção incondicional das portas em texto claro
    - `security.cert_allowed_cn` do engine copiado para o proxy se o proxy não define

TLS desabilitado:
    - legacy remove as portas seguras (as duas famílias nunca coexistem)
    - current não faz limpeza; a assimetria é histórica e mantida
"""

from __future__ import annotations

import posixpath
from typing import Optional, Tuple

from ..config.document import ConfigDocument
from ..topology.types import ClusterTopology
from . import shared
from .context import SynthesisContext
from .dialect import SchemaDialect


TLS_CERT_MOUNT_PATH = "/var/lib/tiflash-tls"
CA_FILE = "ca.crt"
CERT_FILE = "tls.crt"
KEY_FILE = "tls.key"

SECURE_PORT_KEYS = ("tcp_port_secure", "https_port")
PLAINTEXT_PORT_KEYS = ("http_port", "tcp_port")
ALLOWED_CN_KEY = "security.cert_allowed_cn"

_CERT_TRIPLE = (
    ("security.ca_path", CA_FILE),
    ("security.cert_path", CERT_FILE),
    ("security.key_path", KEY_FILE),
)


def apply_tls(
    engine: ConfigDocument,
    proxy: ConfigDocument,
    topology: ClusterTopology,
    dialect: SchemaDialect,
    ctx: Optional[SynthesisContext] = None,
) -> Tuple[ConfigDocument, ConfigDocument]:
    """
    Retorna cópias de `engine` e `proxy` ajustadas à postura TLS do cluster.

    Returns:
        Tuple[ConfigDocument, ConfigDocument]: Novos documentos (engine, proxy).
    """
    engine = engine.copy()
    proxy = proxy.copy()

    if topology.tls_enabled:
        for key, filename in _CERT_TRIPLE:
            cert_path = posixpath.join(TLS_CERT_MOUNT_PATH, filename)
            engine.set(key, cert_path)
            proxy.set(shared.proxy_key(key), cert_path)

        engine.set_if_absent("tcp_port_secure", shared.TCP_PORT)
        engine.set_if_absent("https_port", shared.HTTP_PORT)
        for key in PLAINTEXT_PORT_KEYS:
            engine.delete(key)

        allowed_cn = engine.get(ALLOWED_CN_KEY)
        proxy_cn_key = shared.proxy_key(ALLOWED_CN_KEY)
        if allowed_cn is not None and proxy.get(proxy_cn_key) is None:
            proxy.set(proxy_cn_key, allowed_cn.interface())

    elif dialect.tls_disabled_cleanup:
        for key in SECURE_PORT_KEYS:
            engine.delete(key)

    if ctx is not None:
        ctx.log(
            stage="tls",
            level="INFO",
            message="postura TLS aplicada",
            tls_enabled=topology.tls_enabled,
            dialect=dialect.name,
        )

    return engine, proxy
