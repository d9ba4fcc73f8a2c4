"""Tests for the ``ListingRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from backup_manager.platform.logging import LOGGER_NAME, ListingRichHandler, setup_logger


def _make_handler() -> ListingRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ListingRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_complete_event_counts_files_and_skipped_dirs() -> None:
    handler = _make_handler()
    record = _build_record(
        listing_event="listing.complete",
        source="local",
        storage_path="/backups/db",
        file_count=3,
        skipped_dirs=1,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Listed 3 files from local:/backups/db" in plain
    assert "(1 directory skipped)" in plain


def test_render_error_event_includes_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        listing_event="listing.error",
        source="s3",
        storage_path="/db",
        error_message="Access denied",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Failed listing s3:/db" in plain
    assert "(Access denied)" in plain


def test_render_message_truncates_deep_paths() -> None:
    handler = _make_handler()
    record = _build_record(
        listing_event="listing.start",
        source="local",
        storage_path="/srv/backups/mysql/prod/2024/06/03",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "local:/…/prod/2024/06/03" in plain
    assert "srv" not in plain


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert "plain message" in str(rendered)


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "backup-manager.log"

    configured = setup_logger(log_file=log_file, console_level=logging.WARNING)
    try:
        handler_types = [type(handler) for handler in configured.handlers]
        assert ListingRichHandler in handler_types
        assert logging.handlers.RotatingFileHandler in handler_types
        assert log_file.parent.is_dir()
    finally:
        _ = setup_logger()


def test_records_without_markup_keep_square_brackets() -> None:
    handler = _make_handler()
    record = _build_record(markup=False)

    rendered = handler.render_message(record, "add a [storage.<name>] table")

    assert isinstance(rendered, Text)
    assert rendered.plain == "add a [storage.<name>] table"


def test_setup_logger_falls_back_to_console_when_log_dir_is_unusable(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    _ = blocker.write_text("", encoding="utf-8")

    configured = setup_logger(log_file=blocker / "logs" / "backup-manager.log")
    try:
        assert [type(handler) for handler in configured.handlers] == [ListingRichHandler]
    finally:
        _ = setup_logger()
