"""src/backup_manager/features/listing/usecases/listing.py
What: Fetch a storage listing and turn its files into display rows.
Why: Keep the fetch-filter-format sequence independent from console rendering.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, final

from backup_manager.features.listing.domain.models import DisplayRow
from backup_manager.features.listing.usecases.ports import InteractivePrompt, StorageProviderLike
from backup_manager.features.storage.domain.models import DirectoryEntry
from backup_manager.platform.logging import logger

BYTE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
TABLE_HEADERS: Final[tuple[str, ...]] = ("Name", "Extension", "Size", "Created")


def format_bytes(size: int, precision: int = 2) -> str:
    """Render a byte count with a binary unit, e.g. ``1536 -> "1.5 KB"``.

    Negative sizes count as zero and anything beyond the terabyte range stays
    in ``TB``.
    """
    size = max(int(size), 0)
    # bit_length gives floor(log2) exactly, and 1024 == 2**10
    index = (size.bit_length() - 1) // 10 if size > 0 else 0
    index = min(index, len(BYTE_UNITS) - 1)

    value = Decimal(size) / (Decimal(1024) ** index)
    rounded = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {BYTE_UNITS[index]}"


def format_timestamp(timestamp: float, tz: tzinfo | None = None) -> str:
    """Render epoch seconds as ``Mon 3 2024  14:05:09`` (local time by default)."""

    moment = datetime.fromtimestamp(timestamp, tz=tz)
    return f"{moment:%a} {moment.day} {moment:%Y  %H:%M:%S}"


def to_display_row(entry: DirectoryEntry, tz: tzinfo | None = None) -> DisplayRow:
    return DisplayRow(
        name=entry.basename,
        extension=entry.extension or "",
        size=format_bytes(entry.size),
        created=format_timestamp(entry.timestamp, tz),
    )


@final
class ListingFormatter:
    """List one directory of a source and render its files as a table."""

    def __init__(
        self,
        provider: StorageProviderLike,
        prompt: InteractivePrompt,
        *,
        tz: tzinfo | None = None,
    ) -> None:
        self._provider = provider
        self._prompt = prompt
        self._tz = tz

    def list(self, source: str, path: str) -> list[DisplayRow]:
        """Return display rows for the files stored directly under ``path``.

        Directories are dropped; the remaining entries keep the order the
        storage client returned them in.

        Raises:
            ConfigurationMissing: When ``source`` is not configured.
            ConfigurationFieldMissing: When its configuration is incomplete.
            UnsupportedStorageType: When its backend type is not registered.
            ListingFailed: When the storage client cannot list ``path``.
        """
        client = self._provider.get(source)
        logger.debug(
            "Listing %s:%s",
            source,
            path,
            extra={"listing_event": "listing.start", "source": source, "storage_path": path},
        )
        entries = client.list_contents(path)

        files = [entry for entry in entries if not entry.is_dir]
        extra = {"source": source, "storage_path": path, "skipped_dirs": len(entries) - len(files)}
        if files:
            logger.debug(
                "Listed %d file(s) from %s:%s",
                len(files),
                source,
                path,
                extra={"listing_event": "listing.complete", "file_count": len(files), **extra},
            )
        else:
            logger.info(
                "No files in %s:%s",
                source,
                path,
                extra={"listing_event": "listing.empty", **extra},
            )

        return [to_display_row(entry, self._tz) for entry in files]

    def render(self, rows: Sequence[DisplayRow]) -> None:
        """Print ``rows`` below the ``Name | Extension | Size | Created`` header."""

        self._prompt.table(TABLE_HEADERS, [row.as_tuple() for row in rows])


__all__ = [
    "BYTE_UNITS",
    "ListingFormatter",
    "TABLE_HEADERS",
    "format_bytes",
    "format_timestamp",
    "to_display_row",
]
