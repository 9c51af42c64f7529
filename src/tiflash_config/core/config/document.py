# src/tiflash_config/core/config/document.py
"""
Documento hierárquico de configuração do TiFlash Config.

Este módulo define o `ConfigDocument`, a árvore chave-valor utilizada
para representar tanto a configuração do engine quanto a do proxy, e o
`ConfigValue`, o valor opcional tipado retornado por `get`.

Caminhos (paths) são strings pontuadas: `"flash.proxy.addr"` endereça a
chave `addr` da tabela `proxy` dentro da tabela `flash`.

Tipos de valor suportados:
    - str, int, float, bool
    - list[str]
    - tabelas aninhadas (dict) criadas implicitamente por `set`

Princípios fundamentais:
    - Semântica de valor: `copy()` produz um documento independente
    - `set_if_absent` é o primitivo sobre o qual todos os defaults são construídos
    - Nenhuma coerção implícita de tipos

Invariantes:
    - Chaves são únicas dentro do documento
    - A ordem de inserção é preservada
    - Valores armazenados nunca são compartilhados com o chamador

Limites explícitos:
    - Não serializa para TOML (responsabilidade do builder externo)
    - Não valida semântica de opções do engine
    - Não realiza I/O
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .errors import TypeMismatchError


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "table"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def _drop_nulls(node: Dict[str, Any]) -> Dict[str, Any]:
    # null (`tmp_path:` em YAML) equivale a chave ausente
    return {
        key: _drop_nulls(value) if isinstance(value, dict) else value
        for key, value in node.items()
        if value is not None
    }


def _split(path: str) -> List[str]:
    if not isinstance(path, str) or not path.strip():
        raise ValueError("path must be a non-empty string")
    return path.split(".")


@dataclass(frozen=True)
class ConfigValue:
    """
    Valor presente em um path do documento, com leitura tipada explícita.

    Cada acessor `as_*` retorna o valor apenas quando o tipo armazenado
    corresponde exatamente ao tipo solicitado; caso contrário levanta
    `TypeMismatchError`. Booleanos não são aceitos como inteiros.
    """

    path: str
    raw: Any

    def as_string(self) -> str:
        if isinstance(self.raw, str):
            return self.raw
        raise TypeMismatchError(self.path, "string", _type_name(self.raw))

    def as_int(self) -> int:
        if isinstance(self.raw, int) and not isinstance(self.raw, bool):
            return self.raw
        raise TypeMismatchError(self.path, "int", _type_name(self.raw))

    def as_float(self) -> float:
        if isinstance(self.raw, float):
            return self.raw
        raise TypeMismatchError(self.path, "float", _type_name(self.raw))

    def as_bool(self) -> bool:
        if isinstance(self.raw, bool):
            return self.raw
        raise TypeMismatchError(self.path, "bool", _type_name(self.raw))

    def as_string_list(self) -> List[str]:
        if isinstance(self.raw, list) and all(isinstance(v, str) for v in self.raw):
            return list(self.raw)
        raise TypeMismatchError(self.path, "list[string]", _type_name(self.raw))

    def interface(self) -> Any:
        """Retorna uma cópia independente do valor bruto, qualquer que seja o tipo."""
        return deepcopy(self.raw)


class ConfigDocument:
    """
    Árvore de configuração com operações get/set/set-if-absent/delete.

    Decisões arquiteturais:
        - Dados de entrada são copiados na construção (sem aliasing)
        - Estruturas intermediárias são criadas sob demanda por `set`
        - `delete` de um path ausente é uma no-op
        - `None` nunca é armazenado: chaves nulas na entrada são descartadas

    Invariantes:
        - `set_if_absent` nunca sobrescreve um valor existente
        - Mutações em uma cópia nunca afetam o documento de origem
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = _drop_nulls(deepcopy(dict(data))) if data else {}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ConfigDocument":
        return cls(data)

    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._data)

    # -----------------------------
    # Leitura
    # -----------------------------
    def get(self, path: str) -> Optional[ConfigValue]:
        node: Any = self._data
        for part in _split(path):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        if node is None:
            return None
        return ConfigValue(path=path, raw=node)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get(path) is not None

    def keys(self) -> List[str]:
        """Paths pontuados de todas as folhas, na ordem de inserção."""
        return list(self._iter_leaves(self._data, ""))

    def _iter_leaves(self, node: Dict[str, Any], prefix: str) -> Iterator[str]:
        for key, value in node.items():
            path = f"{prefix}{key}"
            if isinstance(value, dict) and value:
                yield from self._iter_leaves(value, path + ".")
            else:
                yield path

    # -----------------------------
    # Escrita
    # -----------------------------
    def set(self, path: str, value: Any) -> None:
        """Grava `value` em `path`; `None` remove a chave."""
        if value is None:
            self.delete(path)
            return
        parts = _split(path)
        node = self._data
        for i, part in enumerate(parts[:-1]):
            child = node.get(part)
            if child is None:
                child = {}
                node[part] = child
            elif not isinstance(child, dict):
                prefix = ".".join(parts[: i + 1])
                raise TypeMismatchError(prefix, "table", _type_name(child))
            node = child
        value = deepcopy(value)
        node[parts[-1]] = _drop_nulls(value) if isinstance(value, dict) else value

    def set_if_absent(self, path: str, value: Any) -> bool:
        """Escreve `value` somente se `get(path)` estiver ausente. Retorna True se escreveu."""
        if self.get(path) is not None:
            return False
        self.set(path, value)
        return True

    def delete(self, path: str) -> None:
        parts = _split(path)
        node: Any = self._data
        for part in parts[:-1]:
            if not isinstance(node, dict) or part not in node:
                return
            node = node[part]
        if isinstance(node, dict):
            node.pop(parts[-1], None)

    def copy(self) -> "ConfigDocument":
        return ConfigDocument(self._data)

    # -----------------------------
    # Comparação
    # -----------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDocument):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"ConfigDocument({self._data!r})"
