"""Playground deletion command.

Deletes playgrounds by name, the N most recent ones, or all of them.
Only directories carrying the goplay marker are ever removed.
"""

from typing import Annotated

import typer
from rich.table import Table

from goplay.cli.types import ledger_session, require_config
from goplay.core.config import resolve_home_directory
from goplay.errors import InvalidArgumentError, LedgerIOError
from goplay.ledger.executor import DeletionReport, DeletionResult, PlaygroundDeleter
from goplay.ledger.selector import DeleteAll, parse_request
from goplay.utils.formatting import console, print_error, print_info, print_success, print_warning


def delete(
    target: Annotated[
        str | None,
        typer.Argument(
            help="Playground name, or how many of the most recent playgrounds to delete.",
            show_default=False,
        ),
    ] = None,
    delete_all: Annotated[
        bool,
        typer.Option("--all", "-D", help="Delete all playgrounds."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt for --all."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    atomic: Annotated[
        bool,
        typer.Option("--atomic", help="Rewrite the ledger through a temporary file."),
    ] = False,
) -> None:
    """Delete playgrounds.

    Without arguments the most recent playground is deleted. Failures on
    individual playgrounds are reported and do not stop the others.

    Examples:
        goplay delete            # Most recent playground
        goplay delete scratch    # ~/.goplay/scratch
        goplay delete 3          # Three most recent playgrounds
        goplay delete --all      # Everything, with confirmation
    """
    config = require_config()
    home_dir = resolve_home_directory(config)
    request = parse_request(target, delete_all=delete_all)

    if isinstance(request, DeleteAll) and not dry_run and not yes:
        confirmed = typer.confirm("Delete all playgrounds?", default=False)
        if not confirmed:
            print_info("Aborting deletion.")
            return

    with ledger_session(home_dir) as store:
        deleter = PlaygroundDeleter(store, home_dir, dry_run=dry_run, atomic=atomic)
        try:
            report = deleter.delete(request)
        except InvalidArgumentError as e:
            print_error(str(e))
            return
        except LedgerIOError as e:
            print_error(f"Scanning list of playgrounds failed: {e}")
            return

    _print_report(report)


def _print_report(report: DeletionReport) -> None:
    """Display deletion results."""
    if not report.results:
        print_info("No playgrounds to delete.")
        return

    table = Table(title="Deletion Results", show_lines=False)
    table.add_column("Playground", style="path")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in report.results:
        status, detail = _format_result(r)
        table.add_row(r.path, status, detail)

    console.print(table)

    for r in report.failed:
        print_warning(f"Could not delete {r.path}: {r.error or 'Unknown error'}")

    if report.reconcile_error:
        print_error(f"Playground list not updated: {report.reconcile_error}")

    success_count = sum(1 for r in report.results if r.success)
    fail_count = len(report.failed)
    dry_count = sum(1 for r in report.results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} playground(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} deleted, {fail_count} failed")
    else:
        print_success(f"Deleted {success_count} playground(s).")


def _format_result(result: DeletionResult) -> tuple[str, str]:
    if result.dry_run:
        return "[info]dry-run[/]", "Would delete"
    if result.success:
        return "[success]deleted[/]", ""
    return "[error]failed[/]", result.error or "Unknown error"
