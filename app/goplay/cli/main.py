"""Main CLI application entry point.

Defines the Typer application and global options. Running ``goplay``
without a command creates a playground with a generated name.
"""

from typing import Annotated

import typer

from goplay import __version__
from goplay.cli.commands import config, delete, listing, new
from goplay.cli.types import require_config
from goplay.utils.formatting import set_quiet
from goplay.utils.log import configure_logging

app = typer.Typer(
    name="goplay",
    help="Create, open and clean up disposable project playgrounds.",
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"goplay version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """goplay - disposable project playgrounds.

    Without a command, creates a playground with a generated name under
    GOPLAY_DIR (default ~/.goplay) and opens it with GOPLAY_CODE_CMD
    (default 'code').
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose)
    set_quiet(quiet)

    if ctx.invoked_subcommand is None:
        settings = require_config()
        new.create_playground(settings, "", open_editor=settings.open_editor)


# Register commands
app.command(name="new")(new.new)
app.command(name="delete")(delete.delete)
app.command(name="list")(listing.list_playgrounds)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
