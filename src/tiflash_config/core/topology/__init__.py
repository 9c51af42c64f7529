# src/tiflash_config/core/topology/__init__.py
"""
Topologia do cluster: fatos de entrada e endereços derivados.

Single-cluster, heterogêneo (cluster de referência) e across-k8s.
"""
