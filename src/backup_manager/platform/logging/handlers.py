"""Rich console handler rendering storage listing events."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ListingRichHandler(RichHandler):
    """Rich handler that styles ``listing_event`` records and storage paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "listing.start": ("🔎", "cyan"),
        "listing.complete": ("✅", "green"),
        "listing.empty": ("ℹ️", "yellow"),
        "listing.error": ("❌", "red"),
        "arguments.reset": ("↩️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a storage path with coloured separators and compact rendering."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor.rstrip("\\/") + separator if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_listing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured listing events with dedicated styling."""

        event = getattr(record, "listing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = {
            "listing.start": "Listing ",
            "listing.complete": "Listed ",
            "listing.empty": "No files in ",
            "listing.error": "Failed listing ",
            "arguments.reset": "Answers reset",
        }.get(event, "")
        _ = body.append(prefix)

        file_count = getattr(record, "file_count", None)
        if event == "listing.complete" and isinstance(file_count, int):
            noun = "file" if file_count == 1 else "files"
            _ = body.append(f"{file_count} {noun} from ")

        source = getattr(record, "source", None)
        storage_path = getattr(record, "storage_path", None)
        if source:
            _ = body.append(f"{source}:", style=Style(color=color, bold=True))
        if storage_path:
            _ = body.append_text(self._format_path(str(storage_path)))

        details: list[str] = []
        skipped_dirs = getattr(record, "skipped_dirs", None)
        if isinstance(skipped_dirs, int) and skipped_dirs > 0:
            details.append(f"{skipped_dirs} director{'y' if skipped_dirs == 1 else 'ies'} skipped")
        error_message = getattr(record, "error_message", None)
        if event == "listing.error" and error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for listing events."""

        listing_text = self._render_listing_message(record)
        if listing_text is not None:
            return listing_text
        return super().render_message(record, message)


__all__ = ["ListingRichHandler"]
