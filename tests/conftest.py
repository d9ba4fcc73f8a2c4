"""Shared pytest fixtures for the backup-manager test-suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from backup_manager.config.config import Config
from backup_manager.ui.cli.display.prompt import RichPrompt


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config file at a temporary location and reset the singleton."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("BACKUP_MANAGER_CONFIG", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()


@pytest.fixture
def prompt(mocker: MockerFixture) -> MagicMock:
    """Autospecced ``RichPrompt`` whose answers are scripted per test."""

    return mocker.create_autospec(RichPrompt, instance=True)
