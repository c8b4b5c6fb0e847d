"""Create command implementation.

Creates an empty file, or a directory when the name ends with the
path separator.
"""

from typing import Annotated

import typer

from dirctl.cli.types import get_config
from dirctl.core.errors import DirctlError
from dirctl.operations.operator import FileOperator
from dirctl.utils.formatting import print_error, print_success


def create_entry(
    ctx: typer.Context,
    directory: Annotated[
        str,
        typer.Argument(help="Directory to create the entry in."),
    ],
    name: Annotated[
        str,
        typer.Argument(help="Name of the new entry; a trailing '/' creates a directory."),
    ],
) -> None:
    """Create an empty file or a directory."""
    operator = FileOperator(get_config(ctx))

    try:
        path = operator.create(directory, name)
    except DirctlError as e:
        print_error(f"Could not create {name!r}: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Created {path}")
