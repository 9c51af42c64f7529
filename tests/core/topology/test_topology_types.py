# tests/core/topology/test_topology_types.py
"""Testes de ClusterTopology.from_dict e da derivação de `heterogeneous`."""

import dataclasses

import pytest

from tiflash_config.core.topology.types import ClusterTopology, ReferenceCluster


def test_from_dict_defaults():
    t = ClusterTopology.from_dict({"name": "basic", "namespace": "ns"})
    assert t.cluster_domain == ""
    assert t.version == ""
    assert t.storage_claims == 0
    assert t.reference is None
    assert t.heterogeneous is False
    assert not (t.prefer_ipv6 or t.tls_enabled or t.across_k8s)


def test_heterogeneous_requires_reference_name():
    assert ClusterTopology("a", "ns", reference=ReferenceCluster("ref", "ns")).heterogeneous
    assert not ClusterTopology("a", "ns", reference=ReferenceCluster("", "ns")).heterogeneous


@pytest.mark.parametrize(
    "data",
    [
        {"namespace": "ns"},
        {"name": "", "namespace": "ns"},
        {"name": "basic"},
        {"name": "basic", "namespace": "ns", "storage_claims": -1},
    ],
)
def test_from_dict_rejects_invalid_identity(data):
    with pytest.raises(ValueError):
        ClusterTopology.from_dict(data)


def test_from_dict_rejects_non_mapping_reference():
    with pytest.raises(TypeError):
        ClusterTopology.from_dict({"name": "basic", "namespace": "ns", "reference": "ref"})


def test_topology_is_frozen_and_round_trips():
    t = ClusterTopology.from_dict(
        {
            "name": "basic",
            "namespace": "ns",
            "reference": {"name": "ref", "namespace": "other"},
            "across_k8s": True,
        }
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.name = "other"  # type: ignore[misc]
    assert ClusterTopology.from_dict(t.to_dict()) == t


@pytest.mark.parametrize("flag", ["tls_enabled", "prefer_ipv6", "across_k8s", "without_local_pd", "without_local_tidb"])
@pytest.mark.parametrize("value", ["false", "true", 1, 0])
def test_from_dict_rejects_non_boolean_flags(flag, value):
    with pytest.raises(TypeError):
        ClusterTopology.from_dict({"name": "basic", "namespace": "ns", flag: value})


def test_from_dict_null_flag_is_false():
    topology = ClusterTopology.from_dict({"name": "basic", "namespace": "ns", "tls_enabled": None})
    assert topology.tls_enabled is False
