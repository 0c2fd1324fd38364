"""Test configuration and fixtures."""

import pytest
from typing import Any, Dict, List, Optional

from kubeskew.model.node import NodeFact


def _node_item(
    name: str,
    kubelet: str = "v1.20.0",
    kernel: str = "5.4.0-1029-aws",
    os_image: str = "Ubuntu 20.04.1 LTS",
    runtime: str = "containerd://1.4.3",
    cpu: str = "4",
    memory: str = "16393052Ki",
    storage: str = "101430960Ki",
    internal_ip: Optional[str] = "10.0.0.1",
    external_ip: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a node object shaped like `kubectl get nodes -o json` items."""
    addresses = [{"type": "Hostname", "address": name}]
    if internal_ip:
        addresses.append({"type": "InternalIP", "address": internal_ip})
    if external_ip:
        addresses.append({"type": "ExternalIP", "address": external_ip})

    return {
        "apiVersion": "v1",
        "kind": "Node",
        "metadata": {"name": name, "labels": {"kubernetes.io/hostname": name}},
        "status": {
            "addresses": addresses,
            "capacity": {
                "cpu": cpu,
                "memory": memory,
                "ephemeral-storage": storage,
                "pods": "110",
            },
            "nodeInfo": {
                "kernelVersion": kernel,
                "kubeletVersion": kubelet,
                "osImage": os_image,
                "containerRuntimeVersion": runtime,
                "architecture": "amd64",
            },
        },
    }


def _make_nodes(versions: List[str], field: str = "kubelet_version") -> List[NodeFact]:
    """One NodeFact per version, named node1..nodeN."""
    return [NodeFact(name=f"node{i}", **{field: v}) for i, v in enumerate(versions, start=1)]


@pytest.fixture
def sample_node_items():
    """Three nodes, the second one lagging on every dimension."""
    return [
        _node_item("node1", internal_ip="10.0.0.1", external_ip="34.1.1.1"),
        _node_item(
            "node2",
            kubelet="v1.19.0",
            kernel="5.4.0-1024-aws",
            os_image="Ubuntu 18.04.5 LTS",
            runtime="containerd://1.3.3",
            cpu="2",
            memory="8Gi",
            storage="50Gi",
            internal_ip="10.0.0.2",
        ),
        _node_item("node3", internal_ip="10.0.0.3"),
    ]


@pytest.fixture
def kubeconfig_file(tmp_path):
    """An existing (empty) kubeconfig file."""
    path = tmp_path / "kubeconfig"
    path.write_text("apiVersion: v1\nkind: Config\n")
    return path


@pytest.fixture
def node_item():
    """Factory for raw node objects."""
    return _node_item


@pytest.fixture
def make_nodes():
    """Factory for NodeFacts with one version field set."""
    return _make_nodes
