"""Rename command implementation.

Renames an entry of a directory, referring to it by the id shown by
``dirctl ls``.
"""

from typing import Annotated

import typer

from dirctl.cli.types import get_config, resolve_ids, scan_or_exit
from dirctl.core.errors import DirctlError
from dirctl.operations.operator import FileOperator
from dirctl.utils.formatting import print_error, print_success


def rename_entry(
    ctx: typer.Context,
    directory: Annotated[
        str,
        typer.Argument(help="Directory containing the entry."),
    ],
    entry_id: Annotated[
        int,
        typer.Argument(help="Entry id as shown by 'dirctl ls'."),
    ],
    new_name: Annotated[
        str,
        typer.Argument(help="New name, relative to the entry's directory."),
    ],
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace an existing destination."),
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
    """Rename an entry."""
    config = get_config(ctx)
    result = scan_or_exit(config, directory, show_all)
    (entry,) = resolve_ids(result, [entry_id])

    try:
        new_path = FileOperator(config).rename(entry, new_name, overwrite=overwrite)
    except DirctlError as e:
        print_error(f'Could not rename "{entry.name}" to "{new_name}": {e}')
        raise typer.Exit(code=1) from e

    print_success(f"Renamed {entry.full_path} -> {new_path}")
