"""XDG-compliant path management for dirctl.

Configuration lives in ~/.config/dirctl/ (or $XDG_CONFIG_HOME/dirctl/).
This module also provides the separator-aware path helpers used by the
engine, which never consult a global separator setting.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dirctl"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dirctl/ (or XDG_CONFIG_HOME/dirctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default engine configuration file path.

    Returns:
        Path to ~/.config/dirctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/dirctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def join_paths(separator: str, *parts: str) -> str:
    """Join path components with a single separator between them.

    A trailing separator on any component is dropped before joining, so
    ``join_paths("/", "/tmp/x/", "sub/")`` gives ``/tmp/x/sub``.

    Args:
        separator: Path separator to join with.
        *parts: Path components.

    Returns:
        Joined path string.
    """
    cleaned: list[str] = []
    for part in parts:
        if part.endswith(separator) and part != separator:
            part = part[: -len(separator)]
        if part == separator:
            # Root component: the join adds the separator back
            part = ""
        cleaned.append(part)
    return separator.join(cleaned) or separator


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return an absolute, normalized path without a trailing separator."""
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def parent_of(path: str) -> str:
    """Return the parent directory of a normalized path (root is its own parent)."""
    return os.path.dirname(path) or path
