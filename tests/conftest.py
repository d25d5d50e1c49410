"""Pytest fixtures for badgegen tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Location of the user config file for the current test."""
    return tmp_path / "config" / "config.yaml"


@pytest.fixture(autouse=True)
def isolated_user_config(config_path: Path) -> Generator[Path, None, None]:
    """Keep tests away from the real ~/.config/badgegen/config.yaml."""
    with (
        patch("badgegen.user_config.get_config_path", return_value=config_path),
        patch("badgegen.cli.get_config_path", return_value=config_path),
    ):
        yield config_path
