"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

import backup_manager.config.paths as paths
from backup_manager.config.paths import (
    default_config_path,
    default_log_file,
    resolve_overridable_path,
)


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Force repository-root detection to a temporary directory."""

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


def test_default_log_file_lives_under_repo_logs(portable_repo_root: Path) -> None:
    assert default_log_file() == portable_repo_root.resolve() / "logs" / "backup-manager.log"


def test_default_config_path_falls_back_to_repo_config(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == portable_repo_root.resolve() / "config" / "config.toml"


def test_env_override_wins_over_default(portable_repo_root: Path, tmp_path: Path) -> None:
    _ = portable_repo_root
    override = tmp_path / "elsewhere.toml"

    assert default_config_path(env={"BACKUP_MANAGER_CONFIG": str(override)}) == override.resolve()


def test_blank_env_override_is_ignored(portable_repo_root: Path) -> None:
    resolved = default_config_path(env={"BACKUP_MANAGER_CONFIG": "   "})

    assert resolved == portable_repo_root.resolve() / "config" / "config.toml"


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"X": str(tmp_path / "env.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit.resolve()


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname = 'tmp'\n")
    nested = tmp_path / "src" / "pkg" / "module.py"
    nested.parent.mkdir(parents=True)

    assert paths._detect_repo_root(nested) == tmp_path  # pyright: ignore[reportPrivateUsage]
