"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from enum import Enum

import typer

from dirctl.core.config import EngineConfig
from dirctl.core.errors import DirctlError
from dirctl.listing.models import Entry, ScanResult
from dirctl.listing.scanner import DirectoryScanner
from dirctl.utils.formatting import print_error, print_warning


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_config(ctx: typer.Context) -> EngineConfig:
    """Return the EngineConfig stored by the main callback.

    Args:
        ctx: Current Typer context.

    Returns:
        The loaded EngineConfig, or defaults if none was stored.
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), EngineConfig):
        return obj["config"]
    return EngineConfig()


def scan_or_exit(
    config: EngineConfig,
    directory: str,
    include_hidden: bool | None,
) -> ScanResult:
    """Scan a directory, reporting failure and exiting with code 1.

    Non-fatal scan warnings are printed to stderr.

    Args:
        config: Engine configuration.
        directory: Directory to scan.
        include_hidden: Hidden-file override (None uses the config).

    Returns:
        The ScanResult.
    """
    try:
        result = DirectoryScanner(config).scan(directory, include_hidden=include_hidden)
    except DirctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for warning in result.warnings:
        print_warning(f"{warning.path}: {warning.message}")
    return result


def resolve_ids(result: ScanResult, ids: list[int]) -> list[Entry]:
    """Look up entries by id, exiting with code 1 if any id is unknown.

    Args:
        result: Fresh scan of the directory the ids refer to.
        ids: Entry ids as shown by ``dirctl ls``.

    Returns:
        Entries in the order the ids were given.
    """
    entries: list[Entry] = []
    missing: list[int] = []
    for entry_id in ids:
        entry = result.find_by_id(entry_id)
        if entry is None:
            missing.append(entry_id)
        else:
            entries.append(entry)

    if missing:
        listed = ", ".join(str(i) for i in missing)
        print_error(f"No entry with id {listed} in {result.directory}")
        raise typer.Exit(code=1)
    return entries
