"""Unit tests for XDG paths and separator-aware path helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from dirctl.core.paths import (
    APP_NAME,
    get_config_dir,
    get_config_path,
    get_user_theme_path,
    join_paths,
    normalize_path,
    parent_of,
)


class TestConfigDir:
    """Tests for XDG config locations."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / APP_NAME
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"
            assert get_user_theme_path() == tmp_path / APP_NAME / "theme.toml"


class TestJoinPaths:
    """Tests for join_paths()."""

    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            (("/tmp/x", "a"), "/tmp/x/a"),
            (("/tmp/x/", "a"), "/tmp/x/a"),
            (("/tmp/x", "sub/"), "/tmp/x/sub"),
            (("/", "etc"), "/etc"),
            (("/",), "/"),
            (("a", "b", "c"), "a/b/c"),
        ],
    )
    def test_slash(self, parts: tuple[str, ...], expected: str) -> None:
        assert join_paths("/", *parts) == expected

    def test_custom_separator(self) -> None:
        assert join_paths("\\", "C:\\dir\\", "file") == "C:\\dir\\file"


class TestNormalization:
    """Tests for normalize_path() and parent_of()."""

    def test_normalize_removes_dots_and_trailing_separator(self) -> None:
        assert normalize_path("/tmp/x/../y/./") == "/tmp/y"

    def test_normalize_relative(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert normalize_path("sub") == os.path.join(os.getcwd(), "sub")

    def test_parent_of(self) -> None:
        assert parent_of("/tmp/x") == "/tmp"
        assert parent_of("/tmp") == "/"
        assert parent_of("/") == "/"
