"""Command line interface package."""

from backup_manager.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
