"""src/backup_manager/features/storage/usecases/repository.py
What: Read-only view over the ``[storage.<name>]`` tables of the config file.
Why: Give the storage provider one place that raises configuration errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, final

from backup_manager.features.storage.domain.errors import ConfigurationMissing
from backup_manager.features.storage.domain.settings import StorageSettings, require_setting


@final
class StorageConfigRepository:
    """Lookup named storage destinations in declaration order."""

    def __init__(
        self,
        entries: Mapping[str, StorageSettings],
        *,
        config_path: Path | None = None,
    ) -> None:
        self._entries: dict[str, StorageSettings] = {
            name: MappingProxyType(dict(settings)) for name, settings in entries.items()
        }
        self._config_path = config_path

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    def names(self) -> list[str]:
        """Return configured source names in file order."""

        return list(self._entries)

    def get(self, name: str) -> StorageSettings:
        """Return the settings of ``name``.

        Raises:
            ConfigurationMissing: When no table exists for ``name``.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise ConfigurationMissing(name) from None

    def require(self, name: str, field: str) -> Any:
        """Return a mandatory field of the source ``name``."""

        return require_setting(name, self.get(name), field)


__all__ = ["StorageConfigRepository"]
