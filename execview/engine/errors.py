"""Exception hierarchy for the presenter package."""
from __future__ import annotations


class PresenterError(Exception):
    """Base exception for all presenter errors."""


class UnsupportedToolError(PresenterError):
    """Tool name does not map to any known tool kind."""
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unsupported tool: {tool_name}")


class ConfigError(PresenterError):
    """Configuration file parsed but has the wrong structure."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
