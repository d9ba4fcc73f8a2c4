"""Display management for CLI interface."""

from backup_manager.ui.cli.display.prompt import RichPrompt

__all__ = ["RichPrompt"]
