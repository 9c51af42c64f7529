# src/tiflash_config/core/synthesis/logs.py
"""
Resolução dos arquivos de log acompanhados pelos sidecars do nó.

O builder externo cria um container `tail -F` por arquivo de log do
engine. Este módulo fornece apenas os insumos desse builder: nome do
sidecar, caminho do arquivo e o volume que precisa ser montado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config.document import ConfigDocument
from . import shared
from .rules import DefaultRule


_LOG_RULES: Tuple[DefaultRule, ...] = (shared.FLASH_CLUSTER_LOG_RULE,) + shared.LOG_PATH_RULES

# ordem de criação dos sidecars
_TARGETS = (
    ("serverlog", "logger.log"),
    ("errorlog", "logger.errorlog"),
    ("clusterlog", "flash.flash_cluster.log"),
)


@dataclass(frozen=True)
class LogTailTarget:
    name: str
    path: str
    volume_name: Optional[str]
    mount_dir: Optional[str]


def _volume_for(path: str) -> Tuple[Optional[str], Optional[str]]:
    parts = path.split("/")
    # pelo menos /dir/arquivo.log
    if len(parts) >= 3:
        return parts[1], "/" + parts[1]
    return None, None


def resolve_log_tail_targets(engine: ConfigDocument) -> List[LogTailTarget]:
    """
    Resolve os alvos de log a partir do documento do engine.

    Os caminhos ausentes recebem os defaults de log; o documento do
    chamador não é alterado.

    Raises:
        TypeMismatchError: Se algum caminho de log não for string.
    """
    document = engine.copy()
    for rule in _LOG_RULES:
        document.set_if_absent(rule.path, rule.value)

    targets: List[LogTailTarget] = []
    for name, key in _TARGETS:
        value = document.get(key)
        path = value.as_string()  # type: ignore[union-attr]
        volume_name, mount_dir = _volume_for(path)
        targets.append(LogTailTarget(name=name, path=path, volume_name=volume_name, mount_dir=mount_dir))
    return targets
