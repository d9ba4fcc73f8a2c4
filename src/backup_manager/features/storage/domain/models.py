"""Domain models shared by storage clients and the listing feature."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Kind of item returned by a storage listing."""

    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One file or directory returned by ``StorageClient.list_contents``."""

    type: EntryType
    basename: str
    extension: str
    size: int
    timestamp: float
    path: str = ""

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIR


__all__ = ["DirectoryEntry", "EntryType"]
