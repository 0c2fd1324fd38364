"""Data models for kubeskew."""

from .cluster import ClusterFetchResult, ClusterHealthSummary
from .config import ClusterConfig, Config, SkewConfig
from .node import Alert, AlertLevel, NodeFact
from .report import ReportFormat

__all__ = [
    "Alert",
    "AlertLevel",
    "NodeFact",
    "ClusterHealthSummary",
    "ClusterFetchResult",
    "ClusterConfig",
    "SkewConfig",
    "Config",
    "ReportFormat",
]
