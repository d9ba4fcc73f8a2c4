"""Concrete storage clients."""

from .local import LocalStorageClient, create_local_client
from .s3 import S3StorageClient, create_s3_client

__all__ = [
    "LocalStorageClient",
    "S3StorageClient",
    "create_local_client",
    "create_s3_client",
]
