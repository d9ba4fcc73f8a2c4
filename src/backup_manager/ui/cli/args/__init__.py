"""Command line argument handling."""

from backup_manager.ui.cli.args.options import CLIArgs, ListStorageContentsArgs
from backup_manager.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ListStorageContentsArgs"]
