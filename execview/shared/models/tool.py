"""Tool invocation, result and display models."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


def parse_input(arguments: str) -> dict:
    """Decode a JSON-serialized tool input into a dict.

    Anything that is not a JSON object is kept under ``_raw`` so the
    invocation can still be described.
    """
    if not arguments:
        return {}
    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError:
        logger.debug("parse_input: input is not JSON, keeping raw text")
        return {"_raw": arguments}
    if not isinstance(parsed, dict):
        logger.debug("parse_input: JSON input is a %s, not an object", type(parsed).__name__)
        return {"_raw": arguments}
    return parsed


@dataclass
class ContentItem:
    type: str = "text"
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}

    @classmethod
    def from_raw(cls, raw: Any) -> ContentItem:
        """Build an item from a dict, a bare string, or an existing item."""
        if isinstance(raw, ContentItem):
            return raw
        if isinstance(raw, dict):
            text = raw.get("text")
            return cls(
                type=str(raw.get("type") or "text"),
                text=text if isinstance(text, str) else "",
            )
        return cls(type="text", text=raw if isinstance(raw, str) else str(raw))


@dataclass
class ContentBlock:
    """Display wrapper around one content item."""

    content: ContentItem
    type: str = "content"

    @classmethod
    def text(cls, text: str) -> ContentBlock:
        return cls(content=ContentItem(type="text", text=text))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content.to_dict()}


@dataclass
class ToolInvocation:
    id: str
    name: str
    input: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToolInvocation:
        raw_input = data.get("input")
        if isinstance(raw_input, str):
            tool_input = parse_input(raw_input)
        elif isinstance(raw_input, dict):
            tool_input = dict(raw_input)
        else:
            tool_input = {}
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            input=tool_input,
        )


@dataclass
class ToolResult:
    """Payload produced by the execution backend once a tool finishes.

    ``content`` is deliberately loose: a string, a list of items, or None.
    """

    content: list[ContentItem] | str | None = None
    tool_use_id: str | None = None
    is_error: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToolResult:
        content = data.get("content")
        if isinstance(content, list):
            content = [
                ContentItem.from_raw(item) for item in content if item is not None
            ]
        return cls(
            content=content,
            tool_use_id=data.get("tool_use_id"),
            is_error=bool(data.get("is_error", False)),
        )


@dataclass
class ToolInfo:
    """What a host UI shows when a tool call starts."""

    title: str
    kind: str
    content: list[ContentBlock] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "kind": self.kind,
            "content": [block.to_dict() for block in self.content],
        }


@dataclass
class ToolUpdate:
    """Partial update applied once a tool call has a result.

    A missing ``content`` means there is nothing to display.
    """

    content: list[ContentBlock] | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.content:
            return {}
        return {"content": [block.to_dict() for block in self.content]}
