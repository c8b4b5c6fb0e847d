"""Engine configuration.

The engine never reads global settings: every scanner, formatter and
operator receives an EngineConfig. The CLI builds one from
~/.config/dirctl/config.toml ([engine] section) on top of the defaults.
"""

import logging
import os
import sys
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, cast

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dirctl.core.paths import get_config_path

logger = logging.getLogger(__name__)

_MAX_MODE = 0o7777


class EngineConfig(BaseModel):
    """Settings threaded through every engine call.

    Attributes:
        path_separator: Separator used to join and display paths.
        show_hidden: Default for including dot-files when scanning.
        dir_mode: Permission bits for directories created by the operator.
        file_mode: Permission bits for files created by the operator.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path_separator: str = "/"
    show_hidden: bool = False
    dir_mode: int = 0o775
    file_mode: int = 0o644

    @field_validator("path_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject an empty separator."""
        if not v:
            msg = "path_separator cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("dir_mode", "file_mode", mode="before")
    @classmethod
    def validate_mode(cls, v: object, info: Any) -> int:
        """Accept integers or octal strings ("775", "0o775") within 0o7777."""
        if isinstance(v, bool):
            msg = f"{info.field_name}: mode must be an integer or octal string"
            raise ValueError(msg)
        if isinstance(v, str):
            text = v.strip().lower().removeprefix("0o")
            try:
                mode = int(text, 8)
            except ValueError:
                msg = f"{info.field_name}: invalid octal mode '{v}'"
                raise ValueError(msg) from None
        elif isinstance(v, int):
            mode = v
        else:
            msg = f"{info.field_name}: mode must be an integer or octal string"
            raise ValueError(msg)
        if not 0 <= mode <= _MAX_MODE:
            msg = f"{info.field_name}: mode {oct(mode)} out of range"
            raise ValueError(msg)
        return mode


def load_toml_section(path: Path, section: str) -> dict[str, object] | None:
    """Load one table from a TOML file.

    Args:
        path: Path to the TOML file.
        section: Name of the top-level table to extract.

    Returns:
        The table contents, or None if the file is missing or unreadable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Failed to read config file %s: %s", path, e)
        return None

    raw: object = data.get(section, {})
    if not isinstance(raw, dict):
        logger.warning("Invalid '%s' section in %s", section, path)
        return None
    return dict(cast(dict[str, object], raw))


def load_config(path: Path | None = None, **overrides: object) -> EngineConfig:
    """Load the engine configuration with user override support.

    Priority (highest first):
    1. Keyword overrides (e.g. from CLI flags), ignoring None values
    2. [engine] section of the config file
    3. EngineConfig defaults

    Args:
        path: Config file to read. Defaults to ~/.config/dirctl/config.toml.
        **overrides: Explicit values taking precedence over the file.

    Returns:
        Validated EngineConfig. Invalid file values fall back to defaults.
    """
    config_path = path if path is not None else get_config_path()
    file_values = load_toml_section(config_path, "engine") or {}
    if file_values:
        logger.debug("Loaded engine config from %s", config_path)

    explicit = {k: v for k, v in overrides.items() if v is not None}

    try:
        return EngineConfig(**{**file_values, **explicit})
    except ValidationError as e:
        logger.warning("Engine config validation failed, using defaults: %s", e)
        print(f"Warning: Invalid configuration in {config_path}: {e}", file=sys.stderr)
        return EngineConfig(**explicit)


def save_config(config: EngineConfig, path: Path | None = None) -> Path:
    """Write the [engine] section of the config file.

    The file is written to a temporary file in the same directory and
    then moved into place with os.replace(). Modes are stored as octal
    strings so the file stays readable.

    Args:
        config: Configuration to persist.
        path: Destination. Defaults to ~/.config/dirctl/config.toml.

    Returns:
        Path where the config was saved.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "engine": {
            "path_separator": config.path_separator,
            "show_hidden": config.show_hidden,
            "dir_mode": f"{config.dir_mode:o}",
            "file_mode": f"{config.file_mode:o}",
        }
    }

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise

    logger.debug("Saved engine config to %s", config_path)
    return config_path
