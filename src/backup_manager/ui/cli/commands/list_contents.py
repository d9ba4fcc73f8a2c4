"""src/backup_manager/ui/cli/commands/list_contents.py
What: Wire argument resolution, storage lookup and table rendering together.
Why: Provide the ``list-storage-contents`` command on top of the listing use cases.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from backup_manager.config.config import Config
from backup_manager.features.listing import (
    ArgumentResolver,
    DisplayRow,
    InteractivePrompt,
    ListingFormatter,
)
from backup_manager.features.storage import (
    BackupManagerError,
    StorageProvider,
    create_default_provider,
)
from backup_manager.features.storage.usecases.repository import StorageConfigRepository
from backup_manager.platform.logging import logger
from backup_manager.ui.cli.args.options import ListStorageContentsArgs
from backup_manager.ui.cli.display.prompt import RichPrompt


@final
class ListStorageContentsCommand:
    """Resolve ``--source``/``--path``, list the directory and print the table."""

    def __init__(
        self,
        args: ListStorageContentsArgs,
        *,
        config_loader: Callable[[], Config] | None = None,
        provider_factory: Callable[[StorageConfigRepository], StorageProvider] | None = None,
        prompt: InteractivePrompt | None = None,
    ) -> None:
        self._args = args
        self._config_loader = config_loader or Config.load
        self._provider_factory = provider_factory or create_default_provider
        self._prompt: InteractivePrompt = prompt or RichPrompt()
        self.rows: list[DisplayRow] = []

    def execute(self) -> bool:
        """Run the command.

        Returns:
            bool: ``True`` when the table was printed, ``False`` when the
            storage lookup or listing failed (already reported).

        Raises:
            ConfigurationError: When no source can be offered for selection.
        """
        repository = self._config_loader().storage_repository()
        provider = self._provider_factory(repository)

        self._prompt.info("Starting list process...")
        self._prompt.line()

        resolver = ArgumentResolver(
            self._prompt,
            provider.get_available_providers,
            config_path=repository.config_path,
        )
        resolved = resolver.resolve({"source": self._args.source, "path": self._args.path})

        formatter = ListingFormatter(provider, self._prompt)
        try:
            self.rows = formatter.list(resolved.source, resolved.path)
        except BackupManagerError as e:
            logger.error(
                "Failed listing %s:%s: %s",
                resolved.source,
                resolved.path,
                e,
                extra={
                    "listing_event": "listing.error",
                    "source": resolved.source,
                    "storage_path": resolved.path,
                    "error_message": str(e),
                },
            )
            return False

        formatter.render(self.rows)
        return True


__all__ = ["ListStorageContentsCommand"]
