"""Ports for the listing feature."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from backup_manager.features.storage.usecases.ports import StorageClient


class InteractivePrompt(Protocol):
    """Blocking console I/O used while resolving arguments and rendering output."""

    def ask(self, question: str, default: str) -> str:
        """Ask a free-text question; empty input yields ``default``."""

        ...

    def choose(self, question: str, choices: Sequence[str], default: str) -> str:
        """Ask for one of ``choices``; empty input yields ``default``."""

        ...

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question."""

        ...

    def info(self, message: str) -> None:
        """Print an informational line."""

        ...

    def line(self, message: str = "", style: str | None = None) -> None:
        """Print a plain line, optionally styled."""

        ...

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Render rows below ``headers``; zero rows still print the header."""

        ...


class StorageProviderLike(Protocol):
    """Resolve source names to storage clients."""

    def get(self, name: str) -> StorageClient:
        ...

    def get_available_providers(self) -> list[str]:
        ...


__all__ = ["InteractivePrompt", "StorageProviderLike"]
