"""Per-dimension version extraction from node facts."""

from enum import Enum
from typing import Callable, Dict

from ..model.node import NodeFact

# Checked in order, only the first match is stripped
RUNTIME_PREFIXES = ("containerd://", "docker://")


class VersionDimension(str, Enum):
    """Version axes tracked per node. Values are the labels used in alerts."""

    KERNEL = "Kernel"
    KUBELET = "Kubelet"
    CONTAINER_RUNTIME = "CRI"
    OS = "OS"


def kernel_version(node: NodeFact) -> str:
    """Kernel version as reported."""
    return node.kernel_version


def kubelet_version(node: NodeFact) -> str:
    """Kubelet version as reported."""
    return node.kubelet_version


def cri_version(node: NodeFact) -> str:
    """Container runtime version without its scheme prefix."""
    version = node.container_runtime
    for prefix in RUNTIME_PREFIXES:
        if version.startswith(prefix):
            return version[len(prefix) :]
    return version


def os_version(node: NodeFact) -> str:
    """Release number for Ubuntu images, the raw image name otherwise."""
    version = node.os_image
    if version.startswith("Ubuntu"):
        parts = version.split(" ")
        if len(parts) < 2:
            return version
        return parts[1]
    return version


VersionGetter = Callable[[NodeFact], str]

EXTRACTORS: Dict[VersionDimension, VersionGetter] = {
    VersionDimension.KERNEL: kernel_version,
    VersionDimension.KUBELET: kubelet_version,
    VersionDimension.CONTAINER_RUNTIME: cri_version,
    VersionDimension.OS: os_version,
}


def extract(dimension: VersionDimension, node: NodeFact) -> str:
    """Extract the comparable version string of a node for one dimension."""
    return EXTRACTORS[VersionDimension(dimension)](node)
