import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .env_expand import expand_env
from .schema import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "lsreg.yaml"


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Loads the YAML config at ``path``.

    Without an explicit path, lsreg.yaml in the working directory is used
    if it exists; otherwise all defaults apply. An explicit path that does
    not exist is an error.
    """
    if path is None:
        default = Path(DEFAULT_CONFIG_PATH)
        if not default.exists():
            return AppConfig()
        path = default

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise ConfigError(f"Config file not found: {cfg_path}")

    with open(cfg_path, "r") as f:
        raw_text = f.read()

    try:
        data = yaml.safe_load(expand_env(raw_text))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {cfg_path} must contain a mapping")

    try:
        config = AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {cfg_path}: {e}") from e

    logger.debug(f"Loaded config from {cfg_path}")
    return config
