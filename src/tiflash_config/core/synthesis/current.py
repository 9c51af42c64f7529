# src/tiflash_config/core/synthesis/current.py
"""
Defaults do dialeto current (engine 5.4.0 ou superior).

A partir de 5.4.0 o próprio engine define a maior parte dos defaults;
aqui ficam apenas os que dependem da topologia do cluster e do layout
de volumes.

Armazenamento:
    - `storage.main.dir` (lista) apenas quando nem ele nem `path` existem
    - `storage.raft.dir` apenas quando `raft.kvstore_path` não existe

Listen host e porta de métricas só são definidos sob IPv6.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..config.document import ConfigDocument
from ..topology.types import ClusterTopology
from . import shared
from .context import SynthesisContext
from .dialect import CURRENT
from .rules import DefaultRule, apply_rules


CURRENT_ENGINE_RULES: Tuple[DefaultRule, ...] = (
    shared.storage_rules(CURRENT)
    # workaround para o tmp_path padrão do engine 5.4.0
    + (DefaultRule("tmp_path", shared.DEFAULT_TMP_PATH),)
    + (
        DefaultRule("tcp_port", shared.TCP_PORT),
        DefaultRule("http_port", shared.HTTP_PORT),
    )
    + shared.FLASH_ADDRESS_RULES
    + (shared.FLASH_CLUSTER_LOG_RULE,)
    + shared.FLASH_PROXY_RULES
    + shared.LOG_PATH_RULES
    + (shared.PD_ADDRESS_RULE,)
    + shared.listen_rules(CURRENT)
)

CURRENT_PROXY_RULES: Tuple[DefaultRule, ...] = shared.PROXY_RULES


def build_current_defaults(
    engine: ConfigDocument,
    proxy: ConfigDocument,
    topology: ClusterTopology,
    ctx: Optional[SynthesisContext] = None,
) -> Tuple[ConfigDocument, ConfigDocument]:
    """Produz cópias de `engine` e `proxy` completadas com os defaults current."""
    engine = engine.copy()
    proxy = proxy.copy()

    engine_written = apply_rules(engine, CURRENT_ENGINE_RULES, topology)
    proxy_written = apply_rules(proxy, CURRENT_PROXY_RULES, topology)

    if ctx is not None:
        ctx.log(
            stage="defaults",
            level="INFO",
            message="defaults current aplicados",
            engine_keys_written=len(engine_written),
            proxy_keys_written=len(proxy_written),
        )

    return engine, proxy
