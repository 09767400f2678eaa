"""Rich markup renderer for tool descriptions (terminal transcripts)."""

from __future__ import annotations

from rich.markup import escape

from execview.shared.models.tool import ContentBlock, ToolInfo, ToolUpdate

_STATUS_MARKUP = {
    "pending": "[yellow]\\[pending][/yellow]",
    "done": "[green]done[/green]",
    "error": "[red]error[/red]",
}

# Display kind -> leading marker.
_KIND_ICONS = {
    "think": "\U0001f500",
}


def _status_markup(status: str) -> str:
    return _STATUS_MARKUP.get(status, f"[dim]{escape(status)}[/dim]")


def render_collapsed_rich(info: ToolInfo, status: str) -> str:
    """Render a collapsed one-liner as a Rich markup string.

    Args:
        info: The invocation description.
        status: One of "pending", "done", "error".
    """
    parts = ["[dim]▶[/dim]"]
    icon = _KIND_ICONS.get(info.kind)
    if icon:
        parts.append(icon)
    parts.append(f"[cyan]{escape(info.title)}[/cyan]")
    parts.append(_status_markup(status))
    return "  ".join(parts)


def _render_blocks(blocks: list[ContentBlock]) -> list[str]:
    lines: list[str] = []
    for block in blocks:
        for text_line in block.content.text.splitlines() or [""]:
            lines.append(f"  {escape(text_line)}")
    return lines


def render_expanded_rich(
    info: ToolInfo,
    update: ToolUpdate | None = None,
    status: str = "done",
) -> str:
    """Render the full expanded view as a Rich markup string.

    The invocation's own content appears under "Prompt" and the result
    blocks, when there are any, under "Output".
    """
    header = ["[dim]▼[/dim]"]
    icon = _KIND_ICONS.get(info.kind)
    if icon:
        header.append(icon)
    header.append(f"[bold cyan]{escape(info.title)}[/bold cyan]")
    header.append(_status_markup(status))
    lines = ["  ".join(header)]

    if info.content:
        lines.append("  [bold dim]Prompt[/bold dim]")
        lines.extend(_render_blocks(info.content))
    if update is not None and update.content:
        lines.append("  [bold dim]Output[/bold dim]")
        lines.extend(_render_blocks(update.content))
    elif status == "pending":
        lines.append("  [yellow]… waiting for output[/yellow]")

    return "\n".join(lines)
