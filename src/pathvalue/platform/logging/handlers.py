"""Rich console handler with path-aware rendering.

Where: platform/logging/handlers.py
What: Render path strings with coloured separators and style structured probe events.
Why: Keep handler formatting apart from logger bootstrap so setup stays concise.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SegmentRichHandler(RichHandler):
    """Rich handler that draws path segments in white and separators in magenta."""

    _PROBE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "probe.success": ("✅", "green"),
        "probe.failure": ("❌", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4
    _SEPARATORS: ClassVar[frozenset[str]] = frozenset({"/", "\\"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and compact rendering.

        Long paths keep their root and the last few segments, with an
        ellipsis standing in for the dropped middle.

        Args:
            path: Compiled path string to format.

        Returns:
            Text: Styled path.
        """
        separator = "\\" if "\\" in path and "/" not in path else "/"
        root, body = self._split_root(path)
        body_parts = [part for part in body.replace("\\", "/").split("/") if part]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT :]

        display = root
        if truncated:
            if display and display[-1] not in self._SEPARATORS:
                display += separator
            display += "…" + separator
        elif display and body_parts and display[-1] not in self._SEPARATORS:
            display += separator
        display += separator.join(body_parts)

        return self._style_path_string(display or '""')

    def _split_root(self, path: str) -> tuple[str, str]:
        """Split ``path`` into its root prefix and the remainder."""

        if path[:1] in self._SEPARATORS:
            return path[:1], path[1:]
        if len(path) >= 2 and path[0].isalpha() and path[1] == ":":
            if len(path) == 2:
                return path, ""
            if path[2] in self._SEPARATORS:
                return path[:2], path[3:]
        return "", path

    def _style_path_string(self, path_string: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in self._SEPARATORS or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_probe_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured probe events with dedicated styling."""

        event = getattr(record, "probe_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PROBE_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event == "probe.success":
            _ = body.append("Probe ok")
        elif event == "probe.failure":
            _ = body.append("Probe failed")
        else:
            _ = body.append(event)

        path = getattr(record, "path", None)
        if isinstance(path, str):
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(path))

        details: list[str] = []
        kind = getattr(record, "kind", None)
        if kind:
            details.append(f"kind={kind}")
        size = getattr(record, "size", None)
        if isinstance(size, int):
            details.append(f"size={size}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for probe events."""

        probe_text = self._render_probe_message(record)
        if probe_text is not None:
            return probe_text

        return super().render_message(record, message)


__all__ = ["SegmentRichHandler"]
