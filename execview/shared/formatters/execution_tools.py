"""Presenter for execution tools (delegated ``Task`` calls).

Invocation descriptions are produced by per-kind describer functions held in
a registry keyed by ``ExecutionToolKind``.  Adding a tool kind requires an
enum member and a single decorated function:

    @invocation_describer(ExecutionToolKind.MY_TOOL)
    def _describe_my_tool(tool_input):
        return ToolInfo(title=..., kind=..., content=[...])

Result payloads are resolved once into ``TextContent``, ``ContentList`` or
``EmptyContent`` and then normalized the same way for every kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Union

from execview.engine.errors import UnsupportedToolError
from execview.shared.formatters.base import ToolHandler
from execview.shared.models.tool import (
    ContentBlock,
    ContentItem,
    ToolInfo,
    ToolInvocation,
    ToolResult,
    ToolUpdate,
)

logger = logging.getLogger(__name__)

TASK_TITLE_FALLBACK = "task"
TASK_DISPLAY_KIND = "think"


class ExecutionToolKind(Enum):
    TASK = "Task"

    @classmethod
    def from_name(cls, name: str) -> ExecutionToolKind:
        """Resolve a tool name, raising UnsupportedToolError when unknown."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedToolError(name) from None


# ── Result content union ──


@dataclass
class TextContent:
    text: str


@dataclass
class ContentList:
    items: list[ContentItem] = field(default_factory=list)


@dataclass
class EmptyContent:
    pass


ResultContent = Union[TextContent, ContentList, EmptyContent]


def classify_content(raw: Any) -> ResultContent:
    """Resolve a loosely-typed ``content`` payload into one variant.

    Empty strings, None and unexpected types all become ``EmptyContent``,
    as do lists with no items left once None entries are dropped.
    """
    if isinstance(raw, str):
        return TextContent(raw) if raw else EmptyContent()
    if isinstance(raw, (list, tuple)):
        items = [ContentItem.from_raw(item) for item in raw if item is not None]
        if not items:
            return EmptyContent()
        return ContentList(items)
    if raw is not None:
        logger.debug("classify_content: ignoring content of type %s", type(raw).__name__)
    return EmptyContent()


# ── Describer registry ──

_DESCRIBERS: dict[ExecutionToolKind, Callable[[dict], ToolInfo]] = {}


def invocation_describer(kind: ExecutionToolKind):
    """Decorator to register the describer for a tool kind."""

    def decorator(fn: Callable[[dict], ToolInfo]):
        _DESCRIBERS[kind] = fn
        return fn

    return decorator


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


@invocation_describer(ExecutionToolKind.TASK)
def _describe_task(tool_input: dict) -> ToolInfo:
    description = _non_empty_str(tool_input.get("description"))
    prompt = _non_empty_str(tool_input.get("prompt"))
    return ToolInfo(
        title=description or TASK_TITLE_FALLBACK,
        kind=TASK_DISPLAY_KIND,
        content=[ContentBlock.text(prompt)] if prompt else [],
    )


class ExecutionToolsHandler(ToolHandler):
    """Describes execution tool calls and normalizes their results."""

    def describe_invocation(self, invocation: ToolInvocation) -> ToolInfo:
        logger.debug(
            "describe_invocation: %s (%s)", invocation.name, invocation.id,
        )
        kind = ExecutionToolKind.from_name(invocation.name)
        tool_input = invocation.input if isinstance(invocation.input, dict) else {}
        return _DESCRIBERS[kind](tool_input)

    def describe_result(
        self,
        result: ToolResult,
        invocation: ToolInvocation | None = None,
    ) -> ToolUpdate:
        # The originating invocation does not change how results display.
        content = classify_content(result.content)
        logger.debug(
            "describe_result: %s for %s",
            type(content).__name__,
            invocation.name if invocation else "<unknown tool>",
        )
        if isinstance(content, TextContent):
            return ToolUpdate(content=[ContentBlock.text(content.text)])
        if isinstance(content, ContentList):
            return ToolUpdate(
                content=[ContentBlock(content=item) for item in content.items],
            )
        return ToolUpdate()
