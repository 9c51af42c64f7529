# src/tiflash_config/core/config/hashing.py
"""
Hashing canônico de documentos sintetizados.

O hash representa a identidade estrutural do par (engine, proxy) gerado
e é consumido pelo mecanismo externo de detecção de mudança, que decide
se um nó em execução precisa ser reiniciado entre passadas de reconcile.

Política de hashing:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input
"""

import hashlib
import json
from typing import Any, Dict, Union

from .document import ConfigDocument


def compute_document_hash(document: Union[ConfigDocument, Dict[str, Any]]) -> str:
    """
    Gera um hash SHA-256 determinístico de um documento (ou de um dict de documentos).

    Args:
        document: `ConfigDocument` ou dicionário puro.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se o objeto fornecido não for documento nem dicionário.
    """
    if isinstance(document, ConfigDocument):
        document = document.to_dict()

    if not isinstance(document, dict):
        raise TypeError(
            f"Documento para hashing deve ser ConfigDocument ou dict, recebido: {type(document).__name__}"
        )

    canonical_json = json.dumps(
        document,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_pair_hash(engine: ConfigDocument, proxy: ConfigDocument) -> str:
    """Hash do par de documentos entregue ao builder de pod."""
    return compute_document_hash({"engine": engine.to_dict(), "proxy": proxy.to_dict()})
