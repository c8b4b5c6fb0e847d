"""List command implementation.

Prints a directory in long-listing form, one row per entry, with the
ids the other commands refer to.
"""

import json
from typing import Annotated, Any

import typer

from dirctl.cli.types import OutputFormat, get_config, scan_or_exit
from dirctl.listing.formatter import EntryFormatter, human_size
from dirctl.listing.models import Entry, ScanResult
from dirctl.utils.formatting import console


def list_directory(
    ctx: typer.Context,
    directory: Annotated[
        str,
        typer.Argument(help="Directory to list."),
    ] = ".",
    show_all: Annotated[
        bool | None,
        typer.Option(
            "--all/--no-all",
            "-a",
            help="Include entries starting with '.' (default from config).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List a directory with ids, permissions, owner, size and date."""
    config = get_config(ctx)
    result = scan_or_exit(config, directory, show_all)

    if output_format == OutputFormat.JSON:
        _print_json(result)
        return

    formatter = EntryFormatter(config)
    for row in formatter.format_all(result):
        console.print(row.to_text(), soft_wrap=True, highlight=False)

    size_value, size_unit = human_size(result.total_size())
    console.print(f"[dim]total {size_value}{size_unit}[/dim]", highlight=False)


# === Private helper functions ===


def _entry_to_dict(entry: Entry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "full_path": entry.full_path,
        "parent_path": entry.parent_path,
        "kind": entry.kind.value,
        "mode": oct(entry.permissions.mode),
        "permissions": entry.permissions.symbolic(entry.kind),
        "link_count": entry.link_count,
        "owner_id": entry.owner_id,
        "owner": entry.owner_name,
        "group_id": entry.group_id,
        "group": entry.group_name,
        "size_bytes": entry.size_bytes,
        "modified_at": entry.modified_at.isoformat() if entry.modified_at else None,
    }


def _print_json(result: ScanResult) -> None:
    """Display a scan result as JSON."""
    data = {
        "directory": result.directory,
        "entries": [_entry_to_dict(entry) for entry in result],
        "warnings": [{"path": w.path, "message": w.message} for w in result.warnings],
    }
    console.print_json(json.dumps(data))
