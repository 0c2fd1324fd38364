"""Node and alert models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class AlertLevel(str, Enum):
    """Alert severity."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Alert(BaseModel):
    """A single health alert."""

    level: AlertLevel
    message: str

    class Config:
        frozen = True


class NodeFact(BaseModel):
    """Facts reported by one node during a fetch."""

    name: str
    internal_ip: str = ""
    external_ip: str = ""
    kernel_version: str = ""
    kubelet_version: str = ""
    os_image: str = ""
    container_runtime: str = ""
    cpu: int = 0
    memory: int = 0
    disk: int = 0
    alerts: List[Alert] = Field(default_factory=list)
