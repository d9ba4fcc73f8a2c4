"""Command execution package for CLI."""

from backup_manager.ui.cli.commands.list_contents import ListStorageContentsCommand

__all__ = ["ListStorageContentsCommand"]
