"""YAML configuration loader.

Layers a YAML file over the EXECVIEW_* environment configuration.

Example YAML:
    logging:
      level: DEBUG
      file: ./logs/execview.log
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import PresenterConfig
from .errors import ConfigError

logger = logging.getLogger(__name__)


def load_yaml_config(path: str | Path) -> PresenterConfig:
    """Load and parse a YAML config file.

    Values in the ``logging`` section win over environment variables;
    anything the file leaves out keeps its ``PresenterConfig.from_env`` value.
    """
    path = Path(path)
    logger.info(
        "load_yaml_config: attempting to load config from %s (exists=%s)",
        path, path.exists()
    )
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(
            "load_yaml_config: config file not found at %s (absolute path: %s)",
            path, path.absolute()
        )
        raise
    except yaml.YAMLError as exc:
        logger.error("load_yaml_config: YAML parse error in %s: %s", path, exc)
        raise

    if not isinstance(raw, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    config = PresenterConfig.from_env()
    section = raw.get("logging")
    if section is None:
        return config
    if not isinstance(section, dict):
        raise ConfigError(str(path), "'logging' must be a mapping")

    if "level" in section:
        config = PresenterConfig(
            log_level=str(section["level"]), log_file=config.log_file,
        )
    if "file" in section:
        file_value = section["file"]
        config.log_file = str(file_value) if file_value else None

    logger.info(
        "load_yaml_config: loaded %s (level=%s, file=%s)",
        path, config.log_level, config.log_file or "<none>",
    )
    return config
