"""Configuration commands.

Show the effective configuration, print the config file location, or
write a config file with the defaults.
"""

from typing import Annotated

import typer
from rich.table import Table

from goplay.cli.types import require_config
from goplay.core.config import (
    EDITOR_ENV,
    HOME_DIR_ENV,
    GoplayConfig,
    config_to_dict,
    resolve_editor_command,
    save_config,
)
from goplay.core.paths import get_config_path
from goplay.errors import ConfigError
from goplay.utils.formatting import console, print_error, print_info, print_success
from goplay.utils.shell import command_exists

app = typer.Typer(
    help="Inspect and create the goplay configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = require_config()

    table = Table(title="goplay configuration", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))
    console.print(table)

    console.print(f"\n[dim]Config file: {get_config_path()}[/dim]")
    console.print(f"[dim]Overrides: {HOME_DIR_ENV}, {EDITOR_ENV}[/dim]")

    try:
        editor = resolve_editor_command(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if not command_exists(editor[0]):
        print_info(f"Editor '{editor[0]}' was not found on PATH.")


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(get_config_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(GoplayConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote {saved}")
