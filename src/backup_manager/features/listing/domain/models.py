"""
Summary: Value objects exchanged between argument resolution and listing.
Why: Keep confirmed inputs and display rows immutable once produced.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Final

REQUIRED_ARGUMENTS: Final[tuple[str, ...]] = ("source", "path")

CollectedArguments = dict[str, str | None]
"""Argument name to collected value; ``None`` or ``""`` means missing."""


@dataclass(frozen=True, slots=True)
class ResolvedArguments:
    """Fully populated, operator-confirmed listing inputs."""

    source: str
    path: str


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """One rendered table row describing a file."""

    name: str
    extension: str
    size: str
    created: str

    def as_tuple(self) -> tuple[str, str, str, str]:
        return astuple(self)


__all__ = ["CollectedArguments", "DisplayRow", "REQUIRED_ARGUMENTS", "ResolvedArguments"]
