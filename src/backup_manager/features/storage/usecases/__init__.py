"""Storage use cases: ports, configuration lookup and the provider."""

from .ports import StorageClient, StorageClientFactory
from .provider import StorageProvider, create_default_provider
from .repository import StorageConfigRepository

__all__ = [
    "StorageClient",
    "StorageClientFactory",
    "StorageConfigRepository",
    "StorageProvider",
    "create_default_provider",
]
