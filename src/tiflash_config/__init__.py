# src/tiflash_config/__init__.py
"""
TiFlash Config: síntese determinística da configuração de nós TiFlash.

Este pacote raiz define o namespace público do TiFlash Config, uma
biblioteca que produz a configuração efetiva do engine analítico e do
proxy co-localizado a partir de um documento parcial do usuário e dos
fatos de topologia do cluster.

Arquitetura em alto nível:
    - core.config    → documento de configuração, loader, merge e hashing
    - core.topology  → tipos de topologia e resolução de endereços
    - core.synthesis → dialetos, tabelas de defaults, TLS e ponto de entrada

Limites explícitos:
    - Não executa o loop de reconcile
    - Não renderiza nem monta os arquivos de configuração
    - Não se comunica com o engine ou o proxy em execução
"""
from .core.config.document import ConfigDocument, ConfigValue
from .core.config.errors import ConfigError, TypeMismatchError, VersionParseError
from .core.synthesis.dialect import CURRENT, LEGACY, SchemaDialect, select_dialect
from .core.synthesis.synthesizer import synthesize
from .core.synthesis.types import SynthesisResult
from .core.topology.types import ClusterTopology, ReferenceCluster

__all__ = [
    "ClusterTopology",
    "ConfigDocument",
    "ConfigError",
    "ConfigValue",
    "CURRENT",
    "LEGACY",
    "ReferenceCluster",
    "SchemaDialect",
    "SynthesisResult",
    "TypeMismatchError",
    "VersionParseError",
    "select_dialect",
    "synthesize",
]
