# src/tiflash_config/core/config/merge.py
"""
Aplicação de um overlay local sobre um documento parcial.

O overlay é percorrido folha a folha (paths pontuados) e cada folha é
gravada no resultado com `ConfigDocument.set`. Tabelas presentes apenas
na base são preservadas; listas são substituídas inteiras.

Invariantes:
    - Nenhum dos documentos de entrada é mutado
    - int e float são intercambiáveis; bool não é número
    - Tabela vs escalar em um mesmo path é conflito estrutural
"""

from typing import Any

from .document import ConfigDocument
from .errors import ConfigTypeConflictError, TypeMismatchError


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__


def overlay_document(base: ConfigDocument, overlay: ConfigDocument) -> ConfigDocument:
    """
    Retorna uma cópia de `base` com as folhas de `overlay` aplicadas por cima.

    Raises:
        ConfigTypeConflictError: Se uma folha do overlay conflitar em tipo
            com o valor da base no mesmo path.
    """
    result = base.copy()

    for path in overlay.keys():
        value = overlay.get(path)
        if value is None:
            continue
        current = result.get(path)

        # tabela vazia no overlay não apaga a tabela da base
        if isinstance(value.raw, dict):
            if current is not None and not isinstance(current.raw, dict):
                raise ConfigTypeConflictError(
                    f"Conflito de tipo em '{path}': {_kind(current.raw)} vs table"
                )
            result.set_if_absent(path, {})
            continue

        if current is not None and _kind(current.raw) != _kind(value.raw):
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{path}': {_kind(current.raw)} vs {_kind(value.raw)}"
            )

        try:
            result.set(path, value.interface())
        except TypeMismatchError as e:
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{e.path}': {e.actual} vs table"
            ) from e

    return result
