"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class ListStorageContentsArgs:
    """Command line arguments for the ``list-storage-contents`` subcommand."""

    command: Literal["list-storage-contents"]
    source: str | None
    path: str | None
    verbose: bool
    quiet: bool


CLIArgs = ListStorageContentsArgs

__all__ = ["CLIArgs", "ListStorageContentsArgs"]
