"""Shared path utilities for configuration and log locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``BACKUP_MANAGER_CONFIG``.
- Logs: repository-root ``<repo_root>/logs/backup-manager.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "BACKUP_MANAGER_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_file() -> Path:
    """Get the default log file path."""

    return (_detect_repo_root() / "logs" / "backup-manager.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_file",
    "resolve_overridable_path",
]
