"""Kubernetes node version-skew inspector."""

__version__ = "0.1.0"
