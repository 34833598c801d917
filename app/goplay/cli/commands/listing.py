"""Playground listing command."""

import json
from pathlib import Path
from typing import Annotated

import typer

from goplay.cli.types import ledger_session, require_config
from goplay.core.config import resolve_home_directory
from goplay.errors import LedgerIOError
from goplay.ledger.marker import is_stamped
from goplay.utils.formatting import console, create_playground_table, print_error, print_info


def list_playgrounds(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """List recorded playgrounds, oldest first.

    The index counts back from the newest playground, so
    `goplay delete N` removes every row numbered N or lower.
    """
    config = require_config()
    home_dir = resolve_home_directory(config)

    with ledger_session(home_dir) as store:
        try:
            entries = store.read_all()
        except LedgerIOError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    rows = [
        {"index": len(entries) - i, "path": entry, "status": _status(Path(entry))}
        for i, entry in enumerate(entries)
    ]

    if as_json:
        console.print_json(json.dumps(rows))
        return

    if not rows:
        print_info(f"No playgrounds in {home_dir}.")
        return

    table = create_playground_table(f"Playgrounds in {home_dir}")
    for row in rows:
        table.add_row(str(row["index"]), str(row["path"]), _styled_status(str(row["status"])))
    console.print(table)


def _status(directory: Path) -> str:
    if not directory.is_dir():
        return "missing"
    if not is_stamped(directory):
        return "unmarked"
    return "ok"


def _styled_status(status: str) -> str:
    styles = {"ok": "success", "missing": "warning", "unmarked": "error"}
    return f"[{styles[status]}]{status}[/]"
