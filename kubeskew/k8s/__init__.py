"""Kubernetes interaction module."""

from .client import K8sClient
from .nodes import build_node_fact

__all__ = ["K8sClient", "build_node_fact"]
