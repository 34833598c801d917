"""goplay configuration and settings.

Configuration is read from ~/.config/goplay/config.toml when present and
then overridden by environment variables:

- GOPLAY_DIR: playground home directory (default ~/.goplay)
- GOPLAY_CODE_CMD: editor command (default "code")
"""

import logging
import os
import shlex
import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from goplay.core.paths import get_config_path, get_default_home_dir, normalize_dir
from goplay.errors import ConfigError, ConfigParseError

logger = logging.getLogger(__name__)

HOME_DIR_ENV = "GOPLAY_DIR"
EDITOR_ENV = "GOPLAY_CODE_CMD"

DEFAULT_EDITOR_COMMAND = "code"
DEFAULT_INIT_COMMAND = ["go", "mod", "init", "main"]
DEFAULT_ENTRY_FILE = "main.go"


class GoplayConfig(BaseModel):
    """Configuration for goplay.

    Attributes:
        home_dir: Directory holding all playgrounds and the ledger.
        editor_command: Editor command line, split shell-style.
        init_command: Module-init command run inside a new playground.
        entry_file: Template source file written into each playground.
        reuse_existing: Allow creating a playground over an existing directory.
        open_editor: Launch the editor after creating a playground.
    """

    model_config = ConfigDict(extra="forbid")

    home_dir: Annotated[
        Path,
        Field(default_factory=get_default_home_dir, description="Playground home directory"),
    ]
    editor_command: Annotated[
        str,
        Field(min_length=1, description="Editor command line"),
    ] = DEFAULT_EDITOR_COMMAND
    init_command: Annotated[
        list[str],
        Field(
            default_factory=lambda: list(DEFAULT_INIT_COMMAND),
            description="Module-init argv (empty list disables)",
        ),
    ]
    entry_file: Annotated[
        str,
        Field(min_length=1, description="Template file name"),
    ] = DEFAULT_ENTRY_FILE
    reuse_existing: Annotated[
        bool,
        Field(description="Reuse an existing directory on create"),
    ] = True
    open_editor: Annotated[
        bool,
        Field(description="Open the editor after create"),
    ] = True

    @field_validator("home_dir", mode="after")
    @classmethod
    def normalize_home_dir(cls, v: Path) -> Path:
        """Expand ``~`` and make the home directory absolute."""
        return normalize_dir(v)

    @field_validator("entry_file")
    @classmethod
    def validate_entry_file(cls, v: str) -> str:
        """Entry file must be a plain file name."""
        if "/" in v or v in (".", ".."):
            msg = f"entry_file must be a plain file name, got '{v}'"
            raise ValueError(msg)
        return v


def load_config(path: Path | None = None) -> GoplayConfig:
    """Load configuration from the config file and environment.

    A missing config file is not an error; defaults are used instead.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated GoplayConfig object with environment overrides applied.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()
    data: dict[str, object] = {}

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e
        logger.debug("Loaded config from %s", config_path)

    home_override = os.environ.get(HOME_DIR_ENV)
    if home_override:
        data["home_dir"] = home_override
    editor_override = os.environ.get(EDITOR_ENV, "").strip()
    if editor_override:
        data["editor_command"] = editor_override

    try:
        return GoplayConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: GoplayConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The GoplayConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: GoplayConfig) -> dict[str, object]:
    """Convert GoplayConfig to a dictionary for TOML serialization.

    Args:
        config: The GoplayConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "home_dir": str(config.home_dir),
        "editor_command": config.editor_command,
        "init_command": list(config.init_command),
        "entry_file": config.entry_file,
        "reuse_existing": config.reuse_existing,
        "open_editor": config.open_editor,
    }


def resolve_home_directory(config: GoplayConfig) -> Path:
    """Return the absolute playground home directory."""
    return config.home_dir


def resolve_editor_command(config: GoplayConfig) -> list[str]:
    """Split the configured editor command into an argv template.

    Args:
        config: Loaded configuration.

    Returns:
        Editor argv without the target path.

    Raises:
        ConfigError: If the command cannot be split or is empty.
    """
    try:
        argv = shlex.split(config.editor_command)
    except ValueError as e:
        raise ConfigError(f"Invalid editor command '{config.editor_command}': {e}") from e
    if not argv:
        raise ConfigError("Editor command is empty")
    return argv
