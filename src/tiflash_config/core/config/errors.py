# src/tiflash_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do TiFlash Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura tipada de documentos, o carregamento de documentos parciais
e a seleção de dialeto.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Divergência de tipo é propagada ao chamador, nunca corrigida
    - Mensagens de erro indicam o caminho (path) afetado

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `TypeMismatchError` é a única exceção levantada pelo ConfigDocument

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não classifica falhas transitórias (responsabilidade do reconcile externo)
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do TiFlash Config.

    Permite captura genérica de falhas de configuração sem confundi-las
    com erros de programação do chamador.
    """


class TypeMismatchError(ConfigError):
    """
    Exceção levantada quando o tipo armazenado em um path não corresponde
    ao tipo solicitado pelo chamador.

    Exemplo:
        - documento: {"logger": {"log": ["a", "b"]}}
        - leitura:   doc.get("logger.log").as_string()

    Também é levantada por `set` quando um segmento intermediário do path
    já contém um valor escalar (não é uma tabela).

    Decisões arquiteturais:
        - Nenhuma coerção de tipos é realizada
        - O erro é síncrono e não é re-tentado internamente
    """

    def __init__(self, path: str, expected: str, actual: str, message: Optional[str] = None) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            message
            or f"Tipo incompatível em '{path}': esperado {expected}, encontrado {actual}"
        )


class VersionParseError(ConfigError):
    """Versão do engine não pôde ser interpretada como versão semântica."""


class DocumentNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de documento parcial (ou de topologia)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar documentos automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um dicionário.

    Listas ou valores escalares no root são inválidos.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos ao aplicar o overlay local
    sobre um documento base.

    Exemplo de conflito:
        - base:    {"logger": {"level": "information"}}
        - overlay: {"logger": "debug"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
