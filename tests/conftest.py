"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from goplay.core.paths import MARKER_FILENAME
from goplay.ledger.store import LedgerStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from the real config and playground home."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.delenv("GOPLAY_DIR", raising=False)
    monkeypatch.delenv("GOPLAY_CODE_CMD", raising=False)


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """An existing playground home directory."""
    home = tmp_path / "goplay-home"
    home.mkdir()
    return home


@pytest.fixture
def store(home_dir: Path) -> Iterator[LedgerStore]:
    """An open ledger inside home_dir."""
    ledger = LedgerStore(home_dir / ".generated_dirs")
    yield ledger
    ledger.close()


def make_playground(home_dir: Path, name: str, *, marked: bool = True) -> Path:
    """Create a playground directory with some content, optionally marked."""
    directory = home_dir / name
    directory.mkdir()
    (directory / "main.go").write_text("package main\n")
    if marked:
        (directory / MARKER_FILENAME).touch()
    return directory


@pytest.fixture
def playground_factory(home_dir: Path, store: LedgerStore):
    """Create playgrounds and record them in the ledger, oldest first."""

    def _factory(*names: str, marked: bool = True) -> list[Path]:
        created = []
        for name in names:
            directory = make_playground(home_dir, name, marked=marked)
            store.append(str(directory))
            created.append(directory)
        return created

    return _factory
