"""CLI commands for dirctl.

This package contains all subcommand implementations.
"""

from dirctl.cli.commands import create, init, ls, rename, rm

__all__ = ["create", "init", "ls", "rename", "rm"]
