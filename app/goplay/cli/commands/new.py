"""Playground creation command.

Creates a playground under the goplay home, scaffolds it and opens it
in the configured editor.
"""

from typing import Annotated

import typer

from goplay.cli.types import ledger_session, require_config
from goplay.core.config import GoplayConfig, resolve_editor_command, resolve_home_directory
from goplay.errors import ConfigError, CreationError, InvalidArgumentError
from goplay.playground.creator import PlaygroundCreator
from goplay.playground.setup import PlaygroundSetup
from goplay.utils.formatting import print_error, print_success


def new(
    name: Annotated[
        str | None,
        typer.Argument(help="Playground name (default: a generated UUID). Cannot be an integer."),
    ] = None,
    no_open: Annotated[
        bool,
        typer.Option("--no-open", help="Do not open the playground in the editor."),
    ] = False,
) -> None:
    """Create a new playground and open it in your editor.

    Examples:
        goplay new             # Generated name
        goplay new scratch     # ~/.goplay/scratch
        goplay new --no-open   # Create only
    """
    config = require_config()
    create_playground(config, name or "", open_editor=config.open_editor and not no_open)


def create_playground(config: GoplayConfig, name: str, *, open_editor: bool = True) -> None:
    """Create a playground, reporting failures and exiting non-zero on error.

    Args:
        config: Loaded configuration.
        name: Requested name, empty for a generated one.
        open_editor: Launch the editor after setup.

    Raises:
        typer.Exit: If the playground cannot be created.
    """
    home_dir = resolve_home_directory(config)
    try:
        editor = resolve_editor_command(config) if open_editor else None
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    setup = PlaygroundSetup(init_command=config.init_command, editor_command=editor)

    with ledger_session(home_dir) as store:
        creator = PlaygroundCreator(
            store,
            home_dir,
            setup,
            entry_file=config.entry_file,
            reuse_existing=config.reuse_existing,
        )
        try:
            directory = creator.create(name)
        except (InvalidArgumentError, CreationError) as e:
            print_error(f"Could not create the playground directory: {e}")
            raise typer.Exit(code=1) from e

    print_success(f"Created playground {directory}")
