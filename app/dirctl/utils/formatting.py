"""Terminal output for the CLI.

Regular output (listings, tables, success notes) goes to ``console`` on
stdout; warnings, errors and log records go to ``err_console`` on stderr.
Both share the dirctl theme so ``dired.*`` styles resolve.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from dirctl.core.theme import get_theme


def _make_console(stderr: bool = False) -> Console:
    # Hex theme colors need truecolor; non-ttys are left to Rich's detection
    stream = sys.stderr if stderr else sys.stdout
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    handler = RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {message}")
