"""
Summary: Listing feature exports for resolving inputs and formatting tables.
Why: Give the CLI layer a single import path for the listing workflow.
"""

from .domain import REQUIRED_ARGUMENTS, CollectedArguments, DisplayRow, ResolvedArguments
from .usecases import (
    TABLE_HEADERS,
    ArgumentResolver,
    InteractivePrompt,
    ListingFormatter,
    format_bytes,
    format_timestamp,
)

__all__ = [
    "ArgumentResolver",
    "CollectedArguments",
    "DisplayRow",
    "InteractivePrompt",
    "ListingFormatter",
    "REQUIRED_ARGUMENTS",
    "ResolvedArguments",
    "TABLE_HEADERS",
    "format_bytes",
    "format_timestamp",
]
