"""Path management for goplay.

Configuration follows the XDG Base Directory Specification, while
playgrounds live under a single home directory of their own.

Defaults:
- Config: ~/.config/goplay/config.toml
- Playgrounds: ~/.goplay/
- Ledger: ~/.goplay/.generated_dirs
"""

import os
from pathlib import Path

from goplay.errors import SetupError

# Application identifier for directory naming
APP_NAME = "goplay"

# Playground home, relative to the user's home directory
DEFAULT_HOME_SUBDIR = ".goplay"

LEDGER_FILENAME = ".generated_dirs"
MARKER_FILENAME = ".goplay_marker"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/goplay/ (or XDG_CONFIG_HOME/goplay/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the config file path.

    Returns:
        Path to ~/.config/goplay/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_home_dir() -> Path:
    """Get the default playground home directory.

    Returns:
        Path to ~/.goplay.
    """
    return Path.home() / DEFAULT_HOME_SUBDIR


def get_ledger_path(home_dir: Path) -> Path:
    """Get the ledger file path inside a playground home.

    Args:
        home_dir: Playground home directory.

    Returns:
        Path to <home_dir>/.generated_dirs.
    """
    return home_dir / LEDGER_FILENAME


def normalize_dir(path: str | Path) -> Path:
    """Expand ``~`` and make a directory path absolute.

    Ledger entries are compared as strings, so every path that can end up
    in the ledger goes through here first.

    Args:
        path: Directory path as given by the user or config.

    Returns:
        Absolute path with the user directory expanded.
    """
    return Path(os.path.abspath(Path(path).expanduser()))


def ensure_home_dir(home_dir: Path) -> Path:
    """Create the playground home directory if it doesn't exist.

    Args:
        home_dir: Playground home directory.

    Returns:
        The created/existing directory path.

    Raises:
        SetupError: If the directory cannot be created.
    """
    try:
        home_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create playground home {home_dir}: Permission denied"
        raise SetupError(msg) from e
    except OSError as e:
        msg = f"Cannot create playground home {home_dir}: {e}"
        raise SetupError(msg) from e
    return home_dir
