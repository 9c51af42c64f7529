# tests/conftest.py
"""
Fixtures compartilhados para testes do TiFlash Config.

Este módulo define fixtures reutilizáveis que fornecem:
- topologias mínimas e determinísticas (local, heterogênea, across-k8s)
- documentos parciais YAML semelhantes ao uso real
- contexto de síntese controlado (SynthesisContext)

Invariantes:
    - Nenhuma fixture realiza I/O fora de `tmp_path`
    - Todas as fixtures retornam objetos novos a cada uso

Limites explícitos:
    - Não substituir testes de integração com o operador
    - Não acoplar testes a valores de produção específicos
"""

import pytest


# =====================================================
# Topologia
# =====================================================

@pytest.fixture
def make_topology():
    """
    Fábrica de `ClusterTopology` com defaults de um cluster simples.

    Cluster `basic` no namespace `ns`, sem domínio, sem referência,
    versão legacy (v5.3.0). Qualquer campo pode ser sobrescrito.
    """
    from tiflash_config.core.topology.types import ClusterTopology

    def _make(**overrides):
        fields = {
            "name": "basic",
            "namespace": "ns",
            "version": "v5.3.0",
        }
        fields.update(overrides)
        return ClusterTopology(**fields)

    return _make


@pytest.fixture
def reference_cluster():
    """Cluster de referência `ref` em `ref-ns`, domínio `cluster.local`."""
    from tiflash_config.core.topology.types import ReferenceCluster

    return ReferenceCluster(name="ref", namespace="ref-ns", cluster_domain="cluster.local")


@pytest.fixture
def synthesis_ctx():
    from tiflash_config.core.synthesis.context import SynthesisContext

    return SynthesisContext(cluster_id="ns/basic")


# =====================================================
# Documentos parciais
# =====================================================

@pytest.fixture
def partial_engine_yaml() -> str:
    """
    YAML de documento parcial do engine semelhante ao uso real.

    Define o nível de log e uma restrição de CN, mantendo o restante
    para os defaults.

    Returns:
        str: Conteúdo YAML do documento parcial.
    """
    return """\
logger:
  level: debug
security:
  cert_allowed_cn:
    - tidb-client
"""


@pytest.fixture
def partial_engine_local_yaml() -> str:
    """YAML de overlay local para o documento parcial do engine."""
    return """\
logger:
  count: 20
tmp_path: /data1/tmp
"""
