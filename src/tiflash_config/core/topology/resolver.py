# src/tiflash_config/core/topology/resolver.py
"""
Resolução de endereços de rede a partir da topologia do cluster.

Funções puras e totais sobre `ClusterTopology`. Cada função devolve o
endereço textual que será gravado como default no documento do engine
ou do proxy.

Endereços resolvidos:
    - pd_address                      → placement service (PD)
    - tidb_status_address             → status do compute tier (TiDB)
    - proxy_advertise_address         → endereço anunciado do proxy
    - engine_peer_address             → endereço do engine visto pelo proxy
    - proxy_advertise_status_address  → status anunciado do proxy

Decisões arquiteturais:
    - Topologias across-k8s usam o sentinela `PD_ADDR`, resolvido pelo
      script de inicialização do pod
    - Tráfego entre clusters Kubernetes usa o serviço headless (peer),
      que oferece endereçamento estável por pod
    - Endereços por pod embutem o token `POD_NUM`, substituído pelo
      controller do workload

Invariantes:
    - Nenhuma função falha para uma topologia válida
    - O resultado depende apenas da topologia recebida

Limites explícitos:
    - Não consulta DNS nem o cluster
    - Não decide quais chaves recebem os endereços (ver `synthesis`)
"""

from __future__ import annotations

from .naming import (
    format_cluster_domain,
    pd_member_name,
    tidb_member_name,
    tidb_peer_member_name,
    tiflash_member_name,
    tiflash_peer_member_name,
)
from .types import ClusterTopology


PD_ADDR_SENTINEL = "PD_ADDR"
POD_NUM_PLACEHOLDER = "POD_NUM"

LISTEN_HOST_IPV4 = "0.0.0.0"
LISTEN_HOST_IPV6 = "[::]"
# o engine exige "::" sem colchetes em `listen_host`
ENGINE_LISTEN_HOST_IPV6 = "::"

PD_CLIENT_PORT = 2379
TIDB_STATUS_PORT = 10080
ENGINE_SERVICE_PORT = 3930
PROXY_PORT = 20170
PROXY_STATUS_PORT = 20292


def listen_host(topology: ClusterTopology) -> str:
    """Host de escuta usado em endereços `host:porta` (forma com colchetes no IPv6)."""
    return LISTEN_HOST_IPV6 if topology.prefer_ipv6 else LISTEN_HOST_IPV4


def engine_listen_host(topology: ClusterTopology) -> str:
    """Valor do campo `listen_host` do engine (forma sem colchetes no IPv6)."""
    return ENGINE_LISTEN_HOST_IPV6 if topology.prefer_ipv6 else LISTEN_HOST_IPV4


def pd_address(topology: ClusterTopology) -> str:
    """
    Endereço do placement service.

    Ordem de resolução:
        1. across-k8s → sentinela `PD_ADDR`
        2. heterogêneo sem PD local → PD do cluster de referência,
           qualificado por namespace e domínio da referência
        3. PD local, qualificado apenas pelo namespace
    """
    if topology.across_k8s:
        return PD_ADDR_SENTINEL
    ref = topology.reference
    if topology.heterogeneous and topology.without_local_pd and ref is not None:
        return (
            f"{pd_member_name(ref.name)}.{ref.namespace}.svc"
            f"{format_cluster_domain(ref.cluster_domain)}:{PD_CLIENT_PORT}"
        )
    return f"{pd_member_name(topology.name)}.{topology.namespace}.svc:{PD_CLIENT_PORT}"


def tidb_status_address(topology: ClusterTopology) -> str:
    """
    Endereço de status do compute tier.

    Sem TiDB local em um cluster heterogêneo, aponta para a referência:
    serviço peer quando across-k8s, serviço cluster-local caso contrário.
    """
    ref = topology.reference
    if topology.without_local_tidb and topology.heterogeneous and ref is not None:
        # TODO: cluster across-k8s sem TiDB e sem referência ainda cai no serviço local
        member = tidb_peer_member_name(ref.name) if topology.across_k8s else tidb_member_name(ref.name)
        return (
            f"{member}.{ref.namespace}.svc"
            f"{format_cluster_domain(ref.cluster_domain)}:{TIDB_STATUS_PORT}"
        )
    return f"{tidb_member_name(topology.name)}.{topology.namespace}.svc:{TIDB_STATUS_PORT}"


def _tiflash_pod_address(topology: ClusterTopology, port: int) -> str:
    return (
        f"{tiflash_member_name(topology.name)}-{POD_NUM_PLACEHOLDER}."
        f"{tiflash_peer_member_name(topology.name)}.{topology.namespace}.svc"
        f"{format_cluster_domain(topology.cluster_domain)}:{port}"
    )


def proxy_advertise_address(topology: ClusterTopology) -> str:
    return _tiflash_pod_address(topology, PROXY_PORT)


def engine_peer_address(topology: ClusterTopology) -> str:
    return _tiflash_pod_address(topology, ENGINE_SERVICE_PORT)


def proxy_advertise_status_address(topology: ClusterTopology) -> str:
    return _tiflash_pod_address(topology, PROXY_STATUS_PORT)


def service_address(topology: ClusterTopology) -> str:
    return f"{listen_host(topology)}:{ENGINE_SERVICE_PORT}"


def proxy_listen_address(topology: ClusterTopology) -> str:
    return f"{listen_host(topology)}:{PROXY_PORT}"


def proxy_status_address(topology: ClusterTopology) -> str:
    return f"{listen_host(topology)}:{PROXY_STATUS_PORT}"
