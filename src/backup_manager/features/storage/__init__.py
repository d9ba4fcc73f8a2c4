"""
Summary: Storage feature exports for resolving sources and listing entries.
Why: Offer one import path for the domain types and the provider.
"""

from .domain import (
    BackupManagerError,
    ConfigurationError,
    ConfigurationFieldMissing,
    ConfigurationMissing,
    DirectoryEntry,
    EntryType,
    ListingFailed,
    NoSourcesConfigured,
    StorageError,
    UnsupportedStorageType,
)
from .usecases import StorageClient, StorageProvider, create_default_provider

__all__ = [
    "BackupManagerError",
    "ConfigurationError",
    "ConfigurationFieldMissing",
    "ConfigurationMissing",
    "DirectoryEntry",
    "EntryType",
    "ListingFailed",
    "NoSourcesConfigured",
    "StorageClient",
    "StorageError",
    "StorageProvider",
    "UnsupportedStorageType",
    "create_default_provider",
]
