# src/tiflash_config/core/synthesis/rules.py
"""
Tabelas declarativas de defaults e seu avaliador genérico.

Cada dialeto descreve seus defaults como uma sequência de `DefaultRule`
(path, valor, predicado opcional). Um único avaliador, `apply_rules`,
percorre a tabela e grava cada valor com `set_if_absent`.

Decisões arquiteturais:
    - Valores podem ser literais ou funções da topologia (endereços, paths)
    - O predicado é avaliado sobre o documento no momento da regra,
      permitindo regras de compatibilidade (ex.: "só se `path` ausente")
    - A ordem da tabela é a ordem de inserção no documento

Invariantes:
    - Uma regra nunca sobrescreve um valor já presente
    - Valores literais mutáveis nunca são compartilhados entre documentos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from ..config.document import ConfigDocument
from ..topology.types import ClusterTopology


Predicate = Callable[[ConfigDocument, ClusterTopology], bool]


@dataclass(frozen=True)
class DefaultRule:
    """
    Entrada de uma tabela de defaults.

    Campos:
        - path: chave pontuada no documento
        - value: literal, ou callable `(topology) -> valor`
        - when: predicado opcional `(document, topology) -> bool`
    """

    path: str
    value: Any
    when: Optional[Predicate] = None

    def resolve(self, topology: ClusterTopology) -> Any:
        if callable(self.value):
            return self.value(topology)
        return self.value

    def applies(self, document: ConfigDocument, topology: ClusterTopology) -> bool:
        return self.when is None or bool(self.when(document, topology))


def apply_rules(
    document: ConfigDocument,
    rules: Iterable[DefaultRule],
    topology: ClusterTopology,
) -> List[str]:
    """
    Aplica uma tabela de regras com semântica set-if-absent.

    Returns:
        List[str]: Paths efetivamente escritos, na ordem de aplicação.
    """
    written: List[str] = []
    for rule in rules:
        if not rule.applies(document, topology):
            continue
        if document.set_if_absent(rule.path, rule.resolve(topology)):
            written.append(rule.path)
    return written


def absent(path: str) -> Predicate:
    """Predicado: `path` não existe no documento."""

    def _check(document: ConfigDocument, _topology: ClusterTopology) -> bool:
        return document.get(path) is None

    return _check


def ipv6_only(_document: ConfigDocument, topology: ClusterTopology) -> bool:
    return topology.prefer_ipv6
