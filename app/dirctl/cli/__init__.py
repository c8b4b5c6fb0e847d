"""CLI package for dirctl.

This package contains the Typer application and all subcommands.
"""

from dirctl.cli.main import app

__all__ = ["app"]
