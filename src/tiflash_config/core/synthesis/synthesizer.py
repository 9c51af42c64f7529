# src/tiflash_config/core/synthesis/synthesizer.py
"""
Ponto de entrada da síntese de configuração.

Fluxo:
    1. Cópia dos documentos parciais do chamador (ausente = vazio)
    2. Seleção do dialeto pela versão do engine
    3. Aplicação da tabela de defaults do dialeto
    4. Pós-processamento TLS
    5. Hash canônico do par resultante

Princípios fundamentais:
    - Computação pura, síncrona e sem I/O
    - Nenhum objeto do chamador é mutado
    - Mesmas entradas produzem documentos e hash idênticos

Limites explícitos:
    - Não renderiza TOML nem monta volumes
    - Não agenda nem re-tenta sínteses (responsabilidade do reconcile)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ..config.document import ConfigDocument
from ..config.hashing import compute_pair_hash
from ..topology.types import ClusterTopology
from .context import SynthesisContext
from .current import build_current_defaults
from .dialect import CURRENT, select_dialect
from .legacy import build_legacy_defaults
from .tls import apply_tls
from .types import SynthesisResult


PartialDocument = Union[ConfigDocument, Mapping[str, Any], None]


def _own(document: PartialDocument) -> ConfigDocument:
    if document is None:
        return ConfigDocument()
    if isinstance(document, ConfigDocument):
        return document.copy()
    if isinstance(document, Mapping):
        return ConfigDocument.from_dict(document)
    raise TypeError(
        f"Documento parcial deve ser ConfigDocument, mapeamento ou None, recebido: {type(document).__name__}"
    )


def synthesize(
    topology: ClusterTopology,
    engine: PartialDocument = None,
    proxy: PartialDocument = None,
    *,
    ctx: Optional[SynthesisContext] = None,
    strict_version: bool = False,
) -> SynthesisResult:
    """
    Sintetiza a configuração efetiva do engine e do proxy de um nó.

    Args:
        topology: Fatos de topologia do cluster.
        engine: Documento parcial do engine fornecido pelo usuário.
        proxy: Documento parcial do proxy fornecido pelo usuário.
        ctx: Contexto opcional para eventos e warnings estruturados.
        strict_version: Rejeita versões não interpretáveis em vez de cair no legacy.

    Returns:
        SynthesisResult: Documentos finais, dialeto e hash.

    Raises:
        TypeMismatchError: Se um documento parcial tiver um escalar onde
            uma tabela é necessária.
        VersionParseError: Apenas com `strict_version=True`.
    """
    engine_doc = _own(engine)
    proxy_doc = _own(proxy)

    dialect = select_dialect(topology.version, ctx=ctx, strict=strict_version)
    if ctx is not None:
        ctx.log(
            stage="dialect",
            level="INFO",
            message=f"dialeto {dialect.name} selecionado",
            version=topology.version,
            dialect=dialect.name,
        )

    if dialect is CURRENT:
        engine_doc, proxy_doc = build_current_defaults(engine_doc, proxy_doc, topology, ctx)
    else:
        engine_doc, proxy_doc = build_legacy_defaults(engine_doc, proxy_doc, topology, ctx)

    engine_doc, proxy_doc = apply_tls(engine_doc, proxy_doc, topology, dialect, ctx)

    return SynthesisResult(
        engine=engine_doc,
        proxy=proxy_doc,
        dialect=dialect.name,
        config_hash=compute_pair_hash(engine_doc, proxy_doc),
    )
