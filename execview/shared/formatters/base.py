"""Abstract interface shared by all tool presenters."""
from __future__ import annotations

from abc import ABC, abstractmethod

from execview.shared.models.tool import ToolInfo, ToolInvocation, ToolResult, ToolUpdate


class ToolHandler(ABC):
    """Turns tool invocations and results into display structures."""

    @abstractmethod
    def describe_invocation(self, invocation: ToolInvocation) -> ToolInfo:
        """Build the UI description of a tool call that is about to run."""
        ...

    @abstractmethod
    def describe_result(
        self,
        result: ToolResult,
        invocation: ToolInvocation | None = None,
    ) -> ToolUpdate:
        """Build the partial UI update for a finished tool call."""
        ...
