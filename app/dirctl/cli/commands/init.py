"""Init command implementation.

Writes an engine config file with the current (or given) settings.
"""

from pathlib import Path
from typing import Annotated

import typer

from dirctl.cli.types import get_config
from dirctl.core.config import save_config
from dirctl.core.paths import get_config_path
from dirctl.utils.formatting import console, print_error, print_info, print_success


def init_config(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the config file.",
        ),
    ] = None,
    show_hidden: Annotated[
        bool | None,
        typer.Option(
            "--show-hidden/--hide-hidden",
            help="Default for listing entries starting with '.'.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Create a config file from the active settings.

    Examples:
        dirctl init                      # Write ~/.config/dirctl/config.toml
        dirctl init --show-hidden        # ...listing dot-files by default
        dirctl init -o ./dirctl.toml     # Write somewhere else
    """
    output_path = output or get_config_path()

    if output_path.exists() and not force:
        print_error(f"Config already exists: {output_path}")
        print_info("Use --force to overwrite or specify a different path with --output.")
        raise typer.Exit(code=1)

    config = get_config(ctx)
    if show_hidden is not None:
        config = config.model_copy(update={"show_hidden": show_hidden})

    try:
        saved = save_config(config, output_path)
    except OSError as e:
        print_error(f"Could not write {output_path}: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
    console.print(f"  show_hidden: [info]{config.show_hidden}[/info]")
    console.print(f"  dir_mode: [info]{config.dir_mode:o}[/info]")
    console.print(f"  file_mode: [info]{config.file_mode:o}[/info]")
