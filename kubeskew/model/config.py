"""Configuration models."""

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class ClusterConfig(BaseModel):
    """Connection settings for one cluster."""

    kubeconfig: Path
    context: Optional[str] = None

    @field_validator("kubeconfig")
    @classmethod
    def expand_user(cls, value: Path) -> Path:
        return value.expanduser()


class SkewConfig(BaseModel):
    """Version-skew detection settings."""

    # Abandon a whole dimension on the first unparseable version unless set
    skip_unparseable: bool = False


class Config(BaseModel):
    """Top-level kubeskew configuration."""

    clusters: Dict[str, ClusterConfig] = Field(default_factory=dict)
    skew: SkewConfig = Field(default_factory=SkewConfig)
