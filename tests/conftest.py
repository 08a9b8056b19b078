"""Shared pytest fixtures for alphabetic tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from alphabetic.config.discovery import CONFIG_ENV_VAR
from alphabetic.config.settings import AlphabeticSettings


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state after each test; the CLI reconfigures logging per call."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("alphabetic")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AlphabeticSettings:
    """Default settings with no config file or env overrides in play."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return AlphabeticSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no alphabetic.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
