"""Listing use cases: argument resolution and table formatting."""

from .arguments import DEFAULT_PATH, ArgumentResolver, ResolverState
from .listing import (
    TABLE_HEADERS,
    ListingFormatter,
    format_bytes,
    format_timestamp,
)
from .ports import InteractivePrompt, StorageProviderLike

__all__ = [
    "ArgumentResolver",
    "DEFAULT_PATH",
    "InteractivePrompt",
    "ListingFormatter",
    "ResolverState",
    "StorageProviderLike",
    "TABLE_HEADERS",
    "format_bytes",
    "format_timestamp",
]
