"""Shared helpers for CLI commands.

Commands load the configuration and hold the ledger open for the whole
invocation; both failures end the run with exit code 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from goplay.core.config import GoplayConfig, load_config
from goplay.errors import ConfigError, LedgerIOError, SetupError
from goplay.ledger.store import LedgerStore, open_ledger
from goplay.utils.formatting import print_error


def require_config() -> GoplayConfig:
    """Load configuration or exit with an error.

    Returns:
        Loaded GoplayConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@contextmanager
def ledger_session(home_dir: Path) -> Iterator[LedgerStore]:
    """Open the ledger for the duration of a command.

    Args:
        home_dir: Absolute playground home directory.

    Yields:
        Open LedgerStore, closed when the block exits.

    Raises:
        typer.Exit: If the home directory or ledger cannot be set up.
    """
    try:
        store = open_ledger(home_dir)
    except (SetupError, LedgerIOError) as e:
        print_error(f"Failed to set up home directory: {e}")
        raise typer.Exit(code=1) from e

    with store:
        yield store
