"""Cluster summary models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .node import Alert, NodeFact


class ClusterHealthSummary(BaseModel):
    """Snapshot of one cluster's capacity and version skew."""

    name: str
    cpu: int = 0
    memory: int = 0
    disk: int = 0
    kernel_version: str = ""
    kubelet_version: str = ""
    cri_version: str = ""
    os_version: str = ""
    kernel_alerts: List[Alert] = Field(default_factory=list)
    kubelet_alerts: List[Alert] = Field(default_factory=list)
    cri_alerts: List[Alert] = Field(default_factory=list)
    os_alerts: List[Alert] = Field(default_factory=list)
    nodes: List[NodeFact] = Field(default_factory=list)

    @property
    def fleet_alerts(self) -> List[Alert]:
        """All fleet-wide alerts, kernel first."""
        return self.kernel_alerts + self.kubelet_alerts + self.cri_alerts + self.os_alerts

    @property
    def node_alert_count(self) -> int:
        """Number of alerts attached to individual nodes."""
        return sum(len(node.alerts) for node in self.nodes)


class ClusterFetchResult(BaseModel):
    """Outcome of fetching one cluster as part of a multi-cluster run."""

    cluster: str
    summary: Optional[ClusterHealthSummary] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
