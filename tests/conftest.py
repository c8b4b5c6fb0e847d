"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from dirctl.core.config import EngineConfig
from dirctl.listing.models import Entry, EntryKind, EntryMetadata, PermissionBits


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg_config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def config() -> EngineConfig:
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for listing and deletion tests.

    Layout::

        tree/
            notes.txt
            .hidden
            docs/
                readme.md
                nested/
                    deep.txt
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "notes.txt").write_text("hello")
    (root / ".hidden").write_text("secret")
    docs = root / "docs"
    docs.mkdir()
    (docs / "readme.md").write_text("# readme")
    nested = docs / "nested"
    nested.mkdir()
    (nested / "deep.txt").write_text("deep")
    return root


def _make_entry(
    *,
    entry_id: int = 2,
    name: str = "file.txt",
    parent: str = "/tmp/x",
    kind: EntryKind = EntryKind.REGULAR,
    mode: int = 0o644,
    owner: str = "user",
    size: int = 512,
    modified_at: datetime | None = datetime(2024, 3, 9, 14, 5),
    link_count: int = 1,
) -> Entry:
    """Build an Entry without touching the filesystem."""
    return Entry(
        id=entry_id,
        name=name,
        full_path=f"{parent}/{name}",
        parent_path=parent,
        metadata=EntryMetadata(
            kind=kind,
            permissions=PermissionBits(mode),
            link_count=link_count,
            owner_id=1000,
            owner_name=owner,
            group_id=1000,
            group_name=owner,
            size_bytes=size,
            modified_at=modified_at,
        ),
    )


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    """Factory fixture building Entries without touching the filesystem."""
    return _make_entry
