"""Configuration loading."""

import json
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..model.config import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "KUBESKEW_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".kubeskew" / "config.yaml"


def default_config_path() -> Path:
    """Config path from the environment, or the per-user default."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from a YAML or JSON file.

    Raises:
        ConfigurationError: if the file is missing, unreadable or invalid.
    """
    path = Path(config_path).expanduser() if config_path else default_config_path()

    if not path.is_file():
        raise ConfigurationError(f"config file {path} not found")

    try:
        with open(path, "r") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"failed to read config file {path}: {e}")

    try:
        config = Config(**(data or {}))
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(f"invalid config file {path}: {e}")

    logger.info(f"Loaded config for {len(config.clusters)} cluster(s) from {path}")
    return config
