# src/tiflash_config/core/synthesis/shared.py
"""
Regras de defaults compartilhadas pelos dois dialetos.

As tabelas aqui definidas cobrem endereços, logging, raft e o documento
do proxy, que são semanticamente idênticos entre gerações. Onde a
estrutura diverge (armazenamento, listen host) a função recebe o
descritor `SchemaDialect` e escolhe a forma correspondente.

Convenção de nomes:
    - Documento do engine usa `_` entre palavras (ex.: `security.ca_path`)
    - Documento do proxy usa `-` entre palavras (ex.: `security.ca-path`)
"""

from __future__ import annotations

from typing import List, Tuple

from ..topology import resolver
from ..topology.types import ClusterTopology
from .dialect import SchemaDialect
from .rules import DefaultRule, absent, ipv6_only


DEFAULT_CLUSTER_LOG = "/data0/logs/flash_cluster_manager.log"
DEFAULT_ERROR_LOG = "/data0/logs/error.log"
DEFAULT_SERVER_LOG = "/data0/logs/server.log"

DEFAULT_DATA_PATH = "/data0/db"
DEFAULT_KVSTORE_PATH = "/data0/kvstore"
DEFAULT_TMP_PATH = "/data0/tmp"

TCP_PORT = 9000
HTTP_PORT = 8123
INTERSERVER_HTTP_PORT = 9009
METRICS_PORT = 8234

ENGINE_WORD_SEPARATOR = "_"
PROXY_WORD_SEPARATOR = "-"


def proxy_key(engine_key: str) -> str:
    """Converte uma chave no estilo do engine para o estilo do proxy."""
    return engine_key.replace(ENGINE_WORD_SEPARATOR, PROXY_WORD_SEPARATOR)


def storage_paths(topology: ClusterTopology) -> List[str]:
    """Um diretório de dados por volume declarado; `/data0/db` quando não há volumes."""
    paths = [f"/data{i}/db" for i in range(topology.storage_claims)]
    return paths or [DEFAULT_DATA_PATH]


def storage_rules(dialect: SchemaDialect) -> Tuple[DefaultRule, ...]:
    if not dialect.hierarchical_storage:
        return (DefaultRule("path", lambda t: ",".join(storage_paths(t))),)
    # documentos migrados do legacy mantêm `path` e `raft.kvstore_path`
    return (
        DefaultRule("storage.main.dir", storage_paths, when=absent("path")),
        DefaultRule("storage.raft.dir", [DEFAULT_KVSTORE_PATH], when=absent("raft.kvstore_path")),
    )


FLASH_ADDRESS_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("flash.tidb_status_addr", resolver.tidb_status_address),
    DefaultRule("flash.service_addr", resolver.service_address),
)

FLASH_CLUSTER_LOG_RULE = DefaultRule("flash.flash_cluster.log", DEFAULT_CLUSTER_LOG)

FLASH_PROXY_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("flash.proxy.addr", resolver.proxy_listen_address),
    DefaultRule("flash.proxy.advertise-addr", resolver.proxy_advertise_address),
    DefaultRule("flash.proxy.data-dir", "/data0/proxy"),
    DefaultRule("flash.proxy.config", "/data0/proxy.toml"),
)

LOG_PATH_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("logger.errorlog", DEFAULT_ERROR_LOG),
    DefaultRule("logger.log", DEFAULT_SERVER_LOG),
)

PD_ADDRESS_RULE = DefaultRule("raft.pd_addr", resolver.pd_address)


def listen_rules(dialect: SchemaDialect) -> Tuple[DefaultRule, ...]:
    when = None if dialect.listen_host_always else ipv6_only
    return (
        DefaultRule("listen_host", resolver.engine_listen_host, when=when),
        DefaultRule("status.metrics_port", METRICS_PORT, when=when),
    )


PROXY_RULES: Tuple[DefaultRule, ...] = (
    DefaultRule("log-level", "info"),
    DefaultRule("server.engine-addr", resolver.engine_peer_address),
    DefaultRule("server.status-addr", resolver.proxy_status_address),
    DefaultRule("server.advertise-status-addr", resolver.proxy_advertise_status_address),
)
