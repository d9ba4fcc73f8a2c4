"""Storage domain package."""

from .errors import (
    BackupManagerError,
    ConfigurationError,
    ConfigurationFieldMissing,
    ConfigurationMissing,
    ListingFailed,
    NoSourcesConfigured,
    StorageError,
    UnsupportedStorageType,
)
from .models import DirectoryEntry, EntryType
from .settings import StorageSettings, require_setting

__all__ = [
    "BackupManagerError",
    "ConfigurationError",
    "ConfigurationFieldMissing",
    "ConfigurationMissing",
    "DirectoryEntry",
    "EntryType",
    "ListingFailed",
    "NoSourcesConfigured",
    "StorageError",
    "StorageSettings",
    "UnsupportedStorageType",
    "require_setting",
]
