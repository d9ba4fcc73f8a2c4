"""Filesystem-backed storage client."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import final

from backup_manager.features.storage.domain.errors import ListingFailed
from backup_manager.features.storage.domain.models import DirectoryEntry, EntryType
from backup_manager.features.storage.domain.settings import StorageSettings, require_setting
from backup_manager.platform.logging import logger


@final
class LocalStorageClient:
    """List directories beneath a local root; storage paths are root-relative."""

    def __init__(self, root: Path, *, source: str = "local") -> None:
        self._root = root.expanduser().resolve()
        self._source = source

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        relative = PurePosixPath("/", path).relative_to("/")
        target = (self._root / relative).resolve()
        if not target.is_relative_to(self._root):
            raise ListingFailed(self._source, path, "path escapes the storage root")
        return target

    def list_contents(self, path: str) -> list[DirectoryEntry]:
        """Return the immediate children of ``path`` sorted by name.

        Raises:
            ListingFailed: When the path is missing, not a directory or unreadable.
        """
        directory = self._resolve(path)
        if not directory.is_dir():
            raise ListingFailed(self._source, path, "no such directory")

        try:
            with os.scandir(directory) as it:
                dir_entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ListingFailed(self._source, path, e.strerror or str(e)) from e

        entries: list[DirectoryEntry] = []
        for dir_entry in dir_entries:
            try:
                stat = dir_entry.stat()
                is_dir = dir_entry.is_dir()
            except OSError as e:
                logger.warning(
                    "Skipping unreadable entry %s: %s", dir_entry.path, e, extra={"markup": False}
                )
                continue

            entries.append(
                DirectoryEntry(
                    type=EntryType.DIR if is_dir else EntryType.FILE,
                    basename=dir_entry.name,
                    extension="" if is_dir else Path(dir_entry.name).suffix.removeprefix("."),
                    size=0 if is_dir else stat.st_size,
                    timestamp=stat.st_mtime,
                    path=Path(dir_entry.path).relative_to(self._root).as_posix(),
                )
            )
        return entries


def create_local_client(source: str, settings: StorageSettings) -> LocalStorageClient:
    """Build a ``LocalStorageClient`` from a ``type = "local"`` table."""

    root = require_setting(source, settings, "root")
    return LocalStorageClient(Path(str(root)), source=source)


__all__ = ["LocalStorageClient", "create_local_client"]
