"""Listing domain package."""

from .models import REQUIRED_ARGUMENTS, CollectedArguments, DisplayRow, ResolvedArguments

__all__ = ["CollectedArguments", "DisplayRow", "REQUIRED_ARGUMENTS", "ResolvedArguments"]
