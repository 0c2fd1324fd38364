"""Conversion of node API objects to node facts."""

from typing import Any, Dict

from ..model.node import NodeFact
from ..utils.quantity import quantity_value


def build_node_fact(node: Dict[str, Any]) -> NodeFact:
    """Build a NodeFact from a node object as returned by the API."""
    metadata = node.get("metadata") or {}
    status = node.get("status") or {}
    node_info = status.get("nodeInfo") or {}
    capacity = status.get("capacity") or {}

    internal_ip = ""
    external_ip = ""
    for address in status.get("addresses") or []:
        # Later entries of the same type win
        if address.get("type") == "InternalIP":
            internal_ip = address.get("address", "")
        if address.get("type") == "ExternalIP":
            external_ip = address.get("address", "")

    return NodeFact(
        name=metadata.get("name", ""),
        internal_ip=internal_ip,
        external_ip=external_ip,
        kernel_version=node_info.get("kernelVersion", ""),
        kubelet_version=node_info.get("kubeletVersion", ""),
        os_image=node_info.get("osImage", ""),
        container_runtime=node_info.get("containerRuntimeVersion", ""),
        cpu=quantity_value(capacity.get("cpu")),
        memory=quantity_value(capacity.get("memory")),
        disk=quantity_value(capacity.get("ephemeral-storage")),
    )
