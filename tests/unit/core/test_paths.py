"""Unit tests for path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from goplay.core.paths import (
    APP_NAME,
    ensure_home_dir,
    get_config_dir,
    get_config_path,
    get_default_home_dir,
    get_ledger_path,
    normalize_dir,
)
from goplay.errors import SetupError


class TestConfigPaths:
    """Tests for config directory resolution."""

    def test_default_config_dir(self) -> None:
        """get_config_dir falls back to ~/.config when XDG_CONFIG_HOME is unset."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / APP_NAME

    def test_config_path(self, tmp_path: Path) -> None:
        """The config file is config.toml in the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"


class TestHomePaths:
    """Tests for playground home paths."""

    def test_default_home_dir(self) -> None:
        """Playgrounds default to ~/.goplay."""
        assert get_default_home_dir() == Path.home() / ".goplay"

    def test_ledger_path(self, tmp_path: Path) -> None:
        """The ledger lives directly in the home directory."""
        assert get_ledger_path(tmp_path) == tmp_path / ".generated_dirs"

    def test_normalize_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """normalize_dir expands ~ and resolves relative paths against cwd."""
        monkeypatch.chdir(tmp_path)

        assert normalize_dir("play") == tmp_path / "play"
        assert normalize_dir("~") == Path.home()
        assert normalize_dir(tmp_path / "a" / ".." / "b") == tmp_path / "b"

    def test_ensure_home_dir_creates(self, tmp_path: Path) -> None:
        """ensure_home_dir creates missing parents."""
        home = tmp_path / "x" / "y"

        assert ensure_home_dir(home) == home
        assert home.is_dir()

    def test_ensure_home_dir_existing(self, tmp_path: Path) -> None:
        """An existing home is fine."""
        assert ensure_home_dir(tmp_path) == tmp_path

    def test_ensure_home_dir_permission_error(self, tmp_path: Path) -> None:
        """Permission errors become SetupError."""
        with (
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(SetupError, match="Permission denied"),
        ):
            ensure_home_dir(tmp_path / "home")
