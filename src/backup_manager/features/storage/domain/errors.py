"""
Summary: Error hierarchy raised while resolving and listing storage sources.
Why: Let the CLI map configuration and storage failures to one exit path.
"""

from __future__ import annotations

from pathlib import Path


class BackupManagerError(Exception):
    """Base class for every user-facing failure of the tool."""


class ConfigurationError(BackupManagerError):
    """Raised when the storage configuration cannot satisfy a request."""


class ConfigurationMissing(ConfigurationError):
    """The named source has no configuration block at all."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"No configuration found for source '{source}'")


class ConfigurationFieldMissing(ConfigurationError):
    """The source configuration lacks a field required by its backend."""

    def __init__(self, source: str, field: str) -> None:
        self.source = source
        self.field = field
        super().__init__(
            f"Configuration for source '{source}' is missing required field '{field}'"
        )


class NoSourcesConfigured(ConfigurationError):
    """No storage source is configured, so none can be offered."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path
        message = "No storage sources are configured"
        if config_path is not None:
            message += f"; add a [storage.<name>] table to {config_path}"
        super().__init__(message)


class StorageError(BackupManagerError):
    """Raised when a storage backend cannot serve a request."""


class UnsupportedStorageType(StorageError):
    """The backend type configured for a source has no registered client."""

    def __init__(self, source: str, storage_type: str) -> None:
        self.source = source
        self.storage_type = storage_type
        super().__init__(
            f"Storage type '{storage_type}' of source '{source}' is not supported"
        )


class ListingFailed(StorageError):
    """The storage client could not list the requested path."""

    def __init__(self, source: str, path: str, reason: str) -> None:
        self.source = source
        self.path = path
        self.reason = reason
        super().__init__(f"Could not list '{path}' on source '{source}': {reason}")


__all__ = [
    "BackupManagerError",
    "ConfigurationError",
    "ConfigurationFieldMissing",
    "ConfigurationMissing",
    "ListingFailed",
    "NoSourcesConfigured",
    "StorageError",
    "UnsupportedStorageType",
]
