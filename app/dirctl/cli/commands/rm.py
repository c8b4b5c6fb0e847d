"""Remove command implementation.

Deletes entries of a directory by id. Directories are removed
recursively. Each entry is confirmed interactively unless --yes is given.
"""

from typing import Annotated

import typer
from rich.table import Table

from dirctl.cli.types import get_config, resolve_ids, scan_or_exit
from dirctl.operations.confirm import (
    ConfirmPolicy,
    DeleteOutcome,
    DeleteStatus,
    PromptConfirmation,
    always_yes,
    delete_confirmed,
)
from dirctl.operations.operator import FileOperator
from dirctl.utils.formatting import console, print_info, print_success, print_warning


def remove_entries(
    ctx: typer.Context,
    directory: Annotated[
        str,
        typer.Argument(help="Directory containing the entries."),
    ],
    entry_ids: Annotated[
        list[int],
        typer.Argument(help="Entry ids as shown by 'dirctl ls'."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompts."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    show_all: Annotated[
        bool | None,
        typer.Option(
            "--all/--no-all",
            "-a",
            help="Number entries including those starting with '.'.",
        ),
    ] = None,
) -> None:
    """Delete entries; directories are deleted recursively."""
    config = get_config(ctx)
    result = scan_or_exit(config, directory, show_all)
    entries = resolve_ids(result, entry_ids)

    policy: ConfirmPolicy = always_yes if yes or dry_run else PromptConfirmation()
    operator = FileOperator(config, dry_run=dry_run)
    outcomes = delete_confirmed(operator, entries, policy)

    if not outcomes:
        print_info("Aborted.")
        return

    _print_outcomes(outcomes)

    if any(not o.success for o in outcomes):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_outcomes(outcomes: list[DeleteOutcome]) -> None:
    """Display deletion results."""
    table = Table(title="Deletion Results", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for o in outcomes:
        if o.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif o.status == DeleteStatus.DELETED:
            status = "[success]deleted[/]"
            detail = ""
        elif o.status == DeleteStatus.SKIPPED:
            status = "[muted]skipped[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = o.error or "Unknown error"
        table.add_row(o.entry.full_path, status, detail)

    console.print(table)

    deleted = sum(1 for o in outcomes if o.status == DeleteStatus.DELETED and not o.dry_run)
    failed = sum(1 for o in outcomes if o.status == DeleteStatus.FAILED)
    dry = sum(1 for o in outcomes if o.dry_run)

    if dry:
        print_info(f"Dry-run: {dry} path(s) would be deleted.")
    elif failed:
        print_warning(f"{deleted} deleted, {failed} failed")
    else:
        print_success(f"{deleted} path(s) deleted.")
