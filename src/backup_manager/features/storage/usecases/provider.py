"""src/backup_manager/features/storage/usecases/provider.py
What: Resolve configured source names to storage clients.
Why: Centralise backend selection so commands only deal with source names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from backup_manager.features.storage.domain.errors import UnsupportedStorageType
from backup_manager.features.storage.usecases.ports import StorageClient, StorageClientFactory
from backup_manager.features.storage.usecases.repository import StorageConfigRepository
from backup_manager.platform.logging import logger


@final
class StorageProvider:
    """Build storage clients from the configured ``[storage.<name>]`` tables."""

    def __init__(
        self,
        repository: StorageConfigRepository,
        factories: Mapping[str, StorageClientFactory] | None = None,
    ) -> None:
        self._repository = repository
        self._factories: dict[str, StorageClientFactory] = {}
        for storage_type, factory in (factories or {}).items():
            self.register(storage_type, factory)

    def register(self, storage_type: str, factory: StorageClientFactory) -> None:
        """Register or replace the client factory for ``storage_type``."""

        self._factories[storage_type.casefold()] = factory

    def supported_types(self) -> list[str]:
        return sorted(self._factories)

    def get(self, name: str) -> StorageClient:
        """Return a storage client for the source ``name``.

        Raises:
            ConfigurationMissing: When ``name`` is not configured.
            ConfigurationFieldMissing: When the table lacks ``type`` or a
                backend-specific field.
            UnsupportedStorageType: When no factory is registered for the type.
        """
        storage_type = str(self._repository.require(name, "type"))
        factory = self._factories.get(storage_type.casefold())
        if factory is None:
            raise UnsupportedStorageType(name, storage_type)

        logger.debug("Building %s storage client for source %s", storage_type, name)
        return factory(name, self._repository.get(name))

    def get_available_providers(self) -> list[str]:
        """Return configured source names in file order."""

        return self._repository.names()


def create_default_provider(repository: StorageConfigRepository) -> StorageProvider:
    """Provider wired with every backend shipped with the tool."""

    from backup_manager.features.storage.adapters.local import create_local_client
    from backup_manager.features.storage.adapters.s3 import create_s3_client

    return StorageProvider(
        repository,
        factories={
            "local": create_local_client,
            "s3": create_s3_client,
        },
    )


__all__ = ["StorageProvider", "create_default_provider"]
