"""Configuration loaded from environment variables.

All settings have sensible defaults. Override via EXECVIEW_* env vars.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "./logs/execview.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [pid=%(process)d] %(message)s"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PresenterConfig:
    """Presenter configuration."""

    log_level: str = "INFO"
    # File logging is off unless a path is set (or a level is forced via env).
    log_file: str | None = None

    def __post_init__(self) -> None:
        level = (self.log_level or "").upper()
        if level == "WARN":
            level = "WARNING"
        self.log_level = level if level in _VALID_LEVELS else "INFO"

    @classmethod
    def from_env(cls) -> PresenterConfig:
        """Load configuration from EXECVIEW_* environment variables."""
        env_vars = {
            k: v for k, v in os.environ.items() if k.startswith("EXECVIEW_")
        }
        if env_vars:
            logger.info(
                "PresenterConfig.from_env: EXECVIEW_* env overrides: %s",
                ", ".join(f"{k}={v}" for k, v in sorted(env_vars.items())),
            )
        else:
            logger.debug("PresenterConfig.from_env: no EXECVIEW_* env vars set, using defaults")

        env_level = os.getenv("EXECVIEW_LOG_LEVEL")
        log_file = os.getenv("EXECVIEW_LOG_FILE") or None
        # An explicit level means someone is debugging: log to disk too.
        if env_level and log_file is None:
            log_file = DEFAULT_LOG_FILE
        return cls(
            log_level=env_level or cls.log_level,
            log_file=log_file,
        )


def configure_logging(config: PresenterConfig) -> logging.Logger:
    """Attach handlers to the ``execview`` logger according to *config*.

    Replaces any handlers installed by a previous call so repeated
    configuration does not duplicate output.
    """
    root = logging.getLogger("execview")
    root.setLevel(getattr(logging, config.log_level, logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=2_000_000, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.debug(
        "configure_logging: level=%s file=%s",
        config.log_level, config.log_file or "<none>",
    )
    return root
