"""Fixtures for CLI tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from goplay.utils.shell import CommandResult


@pytest.fixture
def cli_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point GOPLAY_DIR at a fresh temporary home."""
    home = tmp_path / "cli-home"
    monkeypatch.setenv("GOPLAY_DIR", str(home))
    return home


@pytest.fixture
def external() -> Iterator[dict[str, MagicMock]]:
    """Stub out the editor and module-init subprocesses."""
    with (
        patch("goplay.playground.setup.run_interactive", return_value=0) as editor,
        patch(
            "goplay.playground.setup.run_command",
            return_value=CommandResult(stdout="", stderr="", returncode=0),
        ) as init,
    ):
        yield {"editor": editor, "init": init}


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long temporary paths in assertions."""
    from goplay.utils import formatting

    monkeypatch.setattr(formatting.console, "size", (400, 50))
    monkeypatch.setattr(formatting.err_console, "size", (400, 50))
