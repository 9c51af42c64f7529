# src/tiflash_config/core/synthesis/context.py
"""
Contexto de observabilidade de uma chamada de síntese.

Este módulo define o `SynthesisContext`, onde a síntese registra eventos
de log estruturados e warnings não fatais (ex.: fallback de versão).

Princípios fundamentais:
    - Isolamento por chamada (cada síntese possui seu próprio contexto)
    - Logs são eventos estruturados, não strings livres
    - Ausência de estado global compartilhado

Invariantes:
    - Eventos sempre incluem `cluster_id` e `stage`
    - Warnings são agrupados por `stage`
    - Nada registrado aqui entra nos documentos gerados

Limites explícitos:
    - Não persiste eventos
    - Não decide políticas de reconcile
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class SynthesisContext:
    """
    Agregador de eventos e warnings de uma chamada de síntese.

    `cluster_id` identifica o cluster (tipicamente `namespace/nome`) e é
    copiado em todos os eventos.
    """

    cluster_id: str
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "cluster_id": self.cluster_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
