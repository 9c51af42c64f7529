# src/tiflash_config/core/synthesis/types.py
"""
Resultado canônico de uma chamada de síntese.

O `SynthesisResult` é o artefato entregue ao builder externo de pod:
os dois documentos finalizados, o dialeto usado e o hash do par, que o
mecanismo de detecção de mudança compara entre passadas de reconcile.

Invariantes:
    - O resultado é imutável (frozen)
    - `config_hash` corresponde exatamente a (engine, proxy)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..config.document import ConfigDocument


@dataclass(frozen=True)
class SynthesisResult:
    """
    Campos:
        - engine: documento final do engine
        - proxy: documento final do proxy
        - dialect: nome do dialeto aplicado ("legacy" ou "current")
        - config_hash: SHA-256 canônico do par de documentos
    """

    engine: ConfigDocument
    proxy: ConfigDocument
    dialect: str
    config_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "engine": self.engine.to_dict(),
            "proxy": self.proxy.to_dict(),
            "dialect": self.dialect,
            "config_hash": self.config_hash,
        }
