"""Core business logic."""

from .aggregator import ClusterAggregator
from .config import load_config
from .reporter import SummaryReporter

__all__ = ["ClusterAggregator", "load_config", "SummaryReporter"]
