# src/tiflash_config/core/synthesis/dialect.py
"""
Dialetos do schema de configuração e seleção por versão.

Existem duas gerações históricas do schema do engine:
    - legacy  → versões anteriores a 5.4.0 (path plano `path`)
    - current → versões a partir de 5.4.0 (`storage.main.dir` hierárquico)

A seleção é função pura da string de versão. Quando a versão não pode
ser interpretada, a seleção cai no dialeto legacy (fail-open) e o fato é
registrado como warning no contexto de síntese; `strict=True` transforma
essa situação em `VersionParseError`.

Invariantes:
    - "5.4.0" seleciona current; "5.3.9" seleciona legacy
    - Pré-releases ordenam antes da release correspondente
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.errors import VersionParseError
from .context import SynthesisContext


_SEMVER_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)(?:\.(?P<patch>0|[1-9]\d*))?"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


@dataclass(frozen=True, order=True)
class Version:
    """
    Versão semântica comparável.

    `release` é 1 para versões finais e 0 para pré-releases, de modo que
    `5.4.0-nightly < 5.4.0` na ordenação natural da tupla.
    """

    major: int
    minor: int
    patch: int
    release: int = 1
    prerelease: str = ""


def parse_version(text: str) -> Version:
    """
    Interpreta uma string de versão semântica (prefixo `v` e patch opcionais;
    `v5.4` equivale a `5.4.0`).

    Raises:
        VersionParseError: Se `text` não for uma versão semântica válida.
    """
    if not isinstance(text, str):
        raise VersionParseError(f"Versão deve ser string, recebido: {type(text).__name__}")
    m = _SEMVER_RE.match(text.strip())
    if m is None:
        raise VersionParseError(f"Versão inválida: {text!r}")
    pre = m.group("pre") or ""
    return Version(
        major=int(m.group("major")),
        minor=int(m.group("minor")),
        patch=int(m.group("patch") or 0),
        release=0 if pre else 1,
        prerelease=pre,
    )


@dataclass(frozen=True)
class SchemaDialect:
    """
    Descritor das regras estruturais que divergem entre gerações.

    Campos:
        - name: "legacy" ou "current"
        - hierarchical_storage: `storage.main.dir` (lista) em vez de `path`
        - listen_host_always: `listen_host`/`status.metrics_port` também em IPv4
        - tls_disabled_cleanup: remove a família de portas seguras sem TLS
    """

    name: str
    hierarchical_storage: bool
    listen_host_always: bool
    tls_disabled_cleanup: bool


LEGACY = SchemaDialect(
    name="legacy",
    hierarchical_storage=False,
    listen_host_always=True,
    tls_disabled_cleanup=True,
)

CURRENT = SchemaDialect(
    name="current",
    hierarchical_storage=True,
    listen_host_always=False,
    tls_disabled_cleanup=False,
)

# primeira versão em que o engine mudou seus defaults
CURRENT_DIALECT_THRESHOLD: Tuple[int, int, int] = (5, 4, 0)
THRESHOLD_VERSION = Version(*CURRENT_DIALECT_THRESHOLD)


def select_dialect(
    version: str,
    *,
    ctx: Optional[SynthesisContext] = None,
    strict: bool = False,
) -> SchemaDialect:
    """
    Seleciona o dialeto do schema para a versão do engine.

    Args:
        version: Versão semântica do engine (ex.: "v5.4.0").
        ctx: Contexto opcional para registro do fallback.
        strict: Quando True, versão inválida levanta `VersionParseError`.

    Returns:
        SchemaDialect: `CURRENT` se versão >= 5.4.0, senão `LEGACY`.
    """
    try:
        parsed = parse_version(version)
    except VersionParseError as exc:
        if strict:
            raise
        if ctx is not None:
            ctx.add_warning(
                stage="dialect",
                message=f"versão {version!r} não interpretável; usando dialeto legacy",
            )
            ctx.log(stage="dialect", level="WARNING", message=str(exc), version=version)
        return LEGACY

    return CURRENT if parsed >= THRESHOLD_VERSION else LEGACY
