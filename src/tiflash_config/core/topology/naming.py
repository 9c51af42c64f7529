# src/tiflash_config/core/topology/naming.py
"""Nomes de serviços Kubernetes derivados do nome do cluster."""

from __future__ import annotations


def pd_member_name(cluster: str) -> str:
    return f"{cluster}-pd"


def tidb_member_name(cluster: str) -> str:
    return f"{cluster}-tidb"


def tidb_peer_member_name(cluster: str) -> str:
    return f"{cluster}-tidb-peer"


def tiflash_member_name(cluster: str) -> str:
    return f"{cluster}-tiflash"


def tiflash_peer_member_name(cluster: str) -> str:
    return f"{cluster}-tiflash-peer"


def format_cluster_domain(cluster_domain: str) -> str:
    """Sufixo de domínio para DNS: vazio quando não há domínio, senão `.<domínio>`."""
    if not cluster_domain:
        return ""
    return "." + cluster_domain
