# src/tiflash_config/core/config/loader.py
"""
Loader de documentos parciais e de topologia.

Este módulo lê, a partir do disco, os insumos que o colaborador externo
normalmente entrega já carregados: o documento parcial do usuário
(engine ou proxy) e a descrição da topologia do cluster. É útil para
ferramentas, fixtures e testes; a síntese em si nunca faz I/O.

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Aplicar um overlay local opcional folha a folha

Invariantes:
    - Arquivos vazios são interpretados como documentos vazios
    - O overlay local tem precedência sobre o documento base
    - O resultado é sempre um novo objeto (sem aliasing)

Limites explícitos:
    - Não aplica defaults (responsabilidade dos sintetizadores)
    - Não valida semântica das opções do engine
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .document import ConfigDocument
from .merge import overlay_document
from .errors import (
    DocumentNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from ..topology.types import ClusterTopology


PathLike = Union[str, Path]


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo YAML/JSON e valida que a raiz é um dicionário.

    Raises:
        DocumentNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DocumentNotFoundError(f"Arquivo não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        data = json.loads(text) if text.strip() else None

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Root do documento deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_document(path: PathLike, local_path: Optional[PathLike] = None) -> ConfigDocument:
    """
    Carrega um documento parcial, opcionalmente combinado com um overlay local.

    O overlay é ignorado quando o arquivo indicado não existe, seguindo a
    mesma política de overrides locais opcionais do restante do projeto.

    Args:
        path: Caminho do documento parcial base (obrigatório).
        local_path: Caminho opcional de overlay local.

    Returns:
        ConfigDocument: Documento parcial pronto para a síntese.

    Raises:
        DocumentNotFoundError: Se o documento base não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    document = ConfigDocument.from_dict(_load_file(Path(path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            overlay = ConfigDocument.from_dict(_load_file(local_file))
            document = overlay_document(document, overlay)

    return document


def load_topology(path: PathLike) -> ClusterTopology:
    """Carrega a descrição de topologia do cluster (ver `ClusterTopology.from_dict`)."""
    return ClusterTopology.from_dict(_load_file(Path(path)))
