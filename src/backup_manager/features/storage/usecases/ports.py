"""
Summary: Ports describing storage clients and how they are built.
Why: Keep the listing feature independent of any concrete backend.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from backup_manager.features.storage.domain.models import DirectoryEntry
from backup_manager.features.storage.domain.settings import StorageSettings


class StorageClient(Protocol):
    """Backend-specific adapter able to list a directory."""

    def list_contents(self, path: str) -> Sequence[DirectoryEntry]:
        """Return the immediate entries stored under ``path``."""

        ...


StorageClientFactory = Callable[[str, StorageSettings], StorageClient]
"""Build a client from the source name and its configuration table."""


__all__ = ["StorageClient", "StorageClientFactory"]
