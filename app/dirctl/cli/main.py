"""dirctl command-line entry point.

The root callback sets up logging and loads the engine config once; each
command reads it back from the context.
"""

from pathlib import Path
from typing import Annotated

import typer

from dirctl import __version__
from dirctl.cli.commands import create, init, ls, rename, rm
from dirctl.core.config import load_config
from dirctl.utils.formatting import configure_logging

app = typer.Typer(
    name="dirctl",
    help="List directories and manage files from the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dirctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Print the dirctl version.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Engine config file (default: ~/.config/dirctl/config.toml).",
        ),
    ] = None,
) -> None:
    """dirctl - directory listing and file management.

    List a directory with ids, then create, rename or delete entries
    by referring to those ids.
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = load_config(config_path)


app.command(name="ls")(ls.list_directory)
app.command(name="create")(create.create_entry)
app.command(name="rename")(rename.rename_entry)
app.command(name="rm")(rm.remove_entries)
app.command(name="init")(init.init_config)


if __name__ == "__main__":
    app()
