# src/tiflash_config/core/topology/types.py
"""
Tipos de entrada da síntese: fatos de topologia do cluster.

Componentes principais:
    - ReferenceCluster → cluster referenciado por um cluster heterogêneo
    - ClusterTopology  → identidade, flags e layout de armazenamento do nó

Invariantes:
    - Ambos os tipos são imutáveis (frozen) durante uma chamada de síntese
    - `heterogeneous` é derivado: existe referência com nome não vazio

Limites explícitos:
    - Não resolve endereços (ver `resolver`)
    - Não lê objetos do cluster (responsabilidade do reconcile externo)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


_FLAG_FIELDS: Tuple[str, ...] = (
    "prefer_ipv6",
    "tls_enabled",
    "across_k8s",
    "without_local_pd",
    "without_local_tidb",
)


@dataclass(frozen=True)
class ReferenceCluster:
    """Cluster do qual um cluster heterogêneo empresta componentes."""

    name: str
    namespace: str
    cluster_domain: str = ""


@dataclass(frozen=True)
class ClusterTopology:
    """
    Fatos sobre o cluster disponíveis no momento do reconcile.

    Campos:
        - name, namespace, cluster_domain: identidade do cluster local
        - version: versão semântica do engine (ex.: "v5.4.0")
        - prefer_ipv6: preferência por endereços IPv6 de escuta
        - tls_enabled: TLS entre componentes habilitado
        - storage_claims: quantidade de volumes de armazenamento declarados
        - reference: cluster de referência (heterogêneo), opcional
        - across_k8s: topologia espalhada em mais de um cluster Kubernetes
        - without_local_pd: cluster local não possui placement service (PD)
        - without_local_tidb: cluster local não possui compute tier (TiDB)
    """

    name: str
    namespace: str
    cluster_domain: str = ""
    version: str = ""
    prefer_ipv6: bool = False
    tls_enabled: bool = False
    storage_claims: int = 0
    reference: Optional[ReferenceCluster] = None
    across_k8s: bool = False
    without_local_pd: bool = False
    without_local_tidb: bool = False

    @property
    def heterogeneous(self) -> bool:
        return self.reference is not None and bool(self.reference.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClusterTopology":
        """
        Constrói a topologia a partir de um mapeamento (ex.: YAML carregado).

        O namespace da referência, quando omitido, é o namespace local.

        Raises:
            ValueError: Se `name`/`namespace` estiverem ausentes ou
                `storage_claims` for negativo.
            TypeError: Se `reference` não for um mapeamento ou uma flag
                não for booleana (ex.: a string `"false"`).
        """
        name = data.get("name")
        namespace = data.get("namespace")
        if not isinstance(name, str) or not name:
            raise ValueError("topology.name must be a non-empty string")
        if not isinstance(namespace, str) or not namespace:
            raise ValueError("topology.namespace must be a non-empty string")

        claims = int(data.get("storage_claims") or 0)
        if claims < 0:
            raise ValueError("topology.storage_claims must be >= 0")

        flags = {}
        for flag in _FLAG_FIELDS:
            value = data.get(flag)
            if value is None:
                value = False
            if not isinstance(value, bool):
                raise TypeError(f"topology.{flag} deve ser booleano, recebido: {type(value).__name__}")
            flags[flag] = value

        reference = None
        raw_ref = data.get("reference")
        if raw_ref is not None:
            if not isinstance(raw_ref, Mapping):
                raise TypeError("topology.reference deve ser um mapeamento")
            reference = ReferenceCluster(
                name=str(raw_ref.get("name") or ""),
                namespace=str(raw_ref.get("namespace") or namespace),
                cluster_domain=str(raw_ref.get("cluster_domain") or ""),
            )

        return cls(
            name=name,
            namespace=namespace,
            cluster_domain=str(data.get("cluster_domain") or ""),
            version=str(data.get("version") or ""),
            storage_claims=claims,
            reference=reference,
            **flags,
        )

    def to_dict(self) -> Dict[str, Any]:
        ref = None
        if self.reference is not None:
            ref = {
                "name": self.reference.name,
                "namespace": self.reference.namespace,
                "cluster_domain": self.reference.cluster_domain,
            }
        return {
            "name": self.name,
            "namespace": self.namespace,
            "cluster_domain": self.cluster_domain,
            "version": self.version,
            "prefer_ipv6": self.prefer_ipv6,
            "tls_enabled": self.tls_enabled,
            "storage_claims": self.storage_claims,
            "reference": ref,
            "across_k8s": self.across_k8s,
            "without_local_pd": self.without_local_pd,
            "without_local_tidb": self.without_local_tidb,
        }
