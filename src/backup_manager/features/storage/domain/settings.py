"""Typed access to one ``[storage.<name>]`` configuration table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ConfigurationFieldMissing

StorageSettings = Mapping[str, Any]


def require_setting(source: str, settings: StorageSettings, field: str) -> Any:
    """Return a mandatory field, treating blank strings as absent.

    Raises:
        ConfigurationFieldMissing: When ``field`` is absent or blank.
    """
    value = settings.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigurationFieldMissing(source, field)
    return value


__all__ = ["StorageSettings", "require_setting"]
