"""Configuration and error types for the execution tool presenter."""
from .config import PresenterConfig, configure_logging
from .errors import ConfigError, PresenterError, UnsupportedToolError
from .yaml_config import load_yaml_config

__all__ = [
    # Config
    "PresenterConfig",
    "configure_logging",
    "load_yaml_config",
    # Errors
    "ConfigError",
    "PresenterError",
    "UnsupportedToolError",
]
