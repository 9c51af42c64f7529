# src/tiflash_config/core/synthesis/legacy.py
"""
Defaults do dialeto legacy (engine anterior a 5.4.0).

Nesta geração o engine não possui defaults próprios razoáveis, então o
documento recebe uma tabela completa: armazenamento plano em `path`
(diretórios separados por vírgula), as duas famílias de portas (a
família oposta é removida depois pelo TLS), cluster manager, logger,
raft, quotas, usuários e perfis.

Invariantes:
    - Todos os defaults são set-if-absent
    - Os documentos recebidos nunca são mutados
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..config.document import ConfigDocument
from ..topology.types import ClusterTopology
from . import shared
from .context import SynthesisContext
from .dialect import LEGACY
from .rules import DefaultRule, apply_rules


_CACHE_SIZE = 5368709120

_IDENTITY_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("tmp_path", shared.DEFAULT_TMP_PATH),
    DefaultRule("display_name", "TiFlash"),
    DefaultRule("default_profile", "default"),
    DefaultRule("path_realtime_mode", False),
    DefaultRule("mark_cache_size", _CACHE_SIZE),
    DefaultRule("minmax_index_cache_size", _CACHE_SIZE),
)

_PORT_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("tcp_port", shared.TCP_PORT),
    DefaultRule("tcp_port_secure", shared.TCP_PORT),
    DefaultRule("https_port", shared.HTTP_PORT),
    DefaultRule("http_port", shared.HTTP_PORT),
    DefaultRule("interserver_http_port", shared.INTERSERVER_HTTP_PORT),
)

_FLASH_TUNING_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("flash.overlap_threshold", 0.6),
    DefaultRule("flash.compact_log_min_period", 200),
)

_CLUSTER_MANAGER_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("flash.flash_cluster.cluster_manager_path", "/tiflash/flash_cluster_manager"),
    shared.FLASH_CLUSTER_LOG_RULE,
    DefaultRule("flash.flash_cluster.refresh_interval", 20),
    DefaultRule("flash.flash_cluster.update_rule_interval", 10),
    DefaultRule("flash.flash_cluster.master_ttl", 60),
)

_LOGGER_RULES: Tuple[DefaultRule, ...] = shared.LOG_PATH_RULES + (
    DefaultRule("logger.size", "100M"),
    DefaultRule("logger.level", "information"),
    DefaultRule("logger.count", 10),
)

_RAFT_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("raft.kvstore_path", shared.DEFAULT_KVSTORE_PATH),
    DefaultRule("raft.storage_engine", "dt"),
    shared.PD_ADDRESS_RULE,
)

_QUOTA_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("quotas.default.interval.duration", 3600),
    DefaultRule("quotas.default.interval.queries", 0),
    DefaultRule("quotas.default.interval.errors", 0),
    DefaultRule("quotas.default.interval.result_rows", 0),
    DefaultRule("quotas.default.interval.read_rows", 0),
    DefaultRule("quotas.default.interval.execution_time", 0),
)

_USER_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("users.readonly.profile", "readonly"),
    DefaultRule("users.readonly.quota", "default"),
    DefaultRule("users.readonly.networks.ip", "::/0"),
    DefaultRule("users.readonly.password", ""),
    DefaultRule("users.default.profile", "default"),
    DefaultRule("users.default.quota", "default"),
    DefaultRule("users.default.networks.ip", "::/0"),
    DefaultRule("users.default.password", ""),
)

_PROFILE_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("profiles.readonly.readonly", 1),
    DefaultRule("profiles.default.max_memory_usage", 10000000000),
    DefaultRule("profiles.default.load_balancing", "random"),
    DefaultRule("profiles.default.use_uncompressed_cache", 0),
)

LEGACY_ENGINE_RULES: Tuple[DefaultRule, ...] = (
    shared.storage_rules(LEGACY)
    + _IDENTITY_RULES
    + _PORT_RULES
    + shared.FLASH_ADDRESS_RULES
    + _FLASH_TUNING_RULES
    + _CLUSTER_MANAGER_RULES
    + shared.FLASH_PROXY_RULES
    + _LOGGER_RULES
    + (DefaultRule("application.runAsDaemon", True),)
    + _RAFT_RULES
    + shared.listen_rules(LEGACY)
    + _QUOTA_RULES
    + _USER_RULES
    + _PROFILE_RULES
)

LEGACY_PROXY_RULES: Tuple[DefaultRule, ...] = shared.PROXY_RULES


def build_legacy_defaults(
    engine: ConfigDocument,
    proxy: ConfigDocument,
    topology: ClusterTopology,
    ctx: Optional[SynthesisContext] = None,
) -> Tuple[ConfigDocument, ConfigDocument]:
    """
    Produz cópias de `engine` e `proxy` completadas com os defaults legacy.

    Returns:
        Tuple[ConfigDocument, ConfigDocument]: Novos documentos (engine, proxy).
    """
    engine = engine.copy()
    proxy = proxy.copy()

    engine_written = apply_rules(engine, LEGACY_ENGINE_RULES, topology)
    proxy_written = apply_rules(proxy, LEGACY_PROXY_RULES, topology)

    if ctx is not None:
        ctx.log(
            stage="defaults",
            level="INFO",
            message="defaults legacy aplicados",
            engine_keys_written=len(engine_written),
            proxy_keys_written=len(proxy_written),
        )

    return engine, proxy
