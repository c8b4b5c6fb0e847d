"""Tests for DirectoryScanner and find_by_id."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from dirctl.core.config import EngineConfig
from dirctl.core.errors import NotFoundError, OtherError, PermissionDeniedError
from dirctl.listing import decoder
from dirctl.listing.models import EntryKind, find_by_id
from dirctl.listing.scanner import DirectoryScanner


class TestSyntheticEntries:
    """Self and parent entries are always present."""

    @pytest.mark.parametrize("include_hidden", [True, False])
    def test_first_two_entries(self, sample_tree: Path, include_hidden: bool) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=include_hidden)

        first, second = result[0], result[1]
        assert (first.id, first.name, first.kind) == (0, ".", EntryKind.DIRECTORY)
        assert (second.id, second.name, second.kind) == (1, "..", EntryKind.DIRECTORY)
        assert first.full_path == str(sample_tree)
        assert second.full_path == str(sample_tree.parent)
        assert first.parent_path == str(sample_tree)
        assert second.parent_path == str(sample_tree)

    def test_empty_directory(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()

        result = DirectoryScanner().scan(empty, include_hidden=True)

        assert [e.name for e in result] == [".", ".."]
        assert result.warnings == ()

    def test_root_is_its_own_parent(self) -> None:
        result = DirectoryScanner().scan("/", include_hidden=False)
        assert result[0].full_path == "/"
        assert result[1].full_path == "/"

    def test_parent_stat_failure_is_non_fatal(self, sample_tree: Path) -> None:
        """An unreadable parent still yields id 1, with a warning."""
        real_decode = decoder.decode
        parent = str(sample_tree.parent)

        def fake_decode(path: str):  # noqa: ANN202
            if path == parent:
                raise PermissionDeniedError("stat denied", path=path, operation="stat")
            return real_decode(path)

        with patch("dirctl.listing.scanner.decode", side_effect=fake_decode):
            result = DirectoryScanner().scan(sample_tree, include_hidden=True)

        assert result[1].id == 1
        assert result[1].name == ".."
        assert result[1].kind == EntryKind.DIRECTORY
        assert result[1].modified_at is None
        assert [w.path for w in result.warnings] == [parent]


class TestHiddenFilter:
    """Visibility filtering of dot-files."""

    def test_include_hidden(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=True)
        names = {e.name for e in result}
        assert names == {".", "..", "notes.txt", ".hidden", "docs"}

    def test_exclude_hidden(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=False)
        children = [e for e in result if e.id >= 2]
        assert {e.name for e in children} == {"notes.txt", "docs"}
        assert not any(e.name.startswith(".") for e in children)

    def test_hidden_children_are_not_decoded(self, sample_tree: Path) -> None:
        with patch("dirctl.listing.scanner.decode", wraps=decoder.decode) as mock_decode:
            DirectoryScanner().scan(sample_tree, include_hidden=False)

        decoded = [call.args[0] for call in mock_decode.call_args_list]
        assert str(sample_tree / ".hidden") not in decoded

    def test_default_comes_from_config(self, sample_tree: Path) -> None:
        shown = DirectoryScanner(EngineConfig(show_hidden=True)).scan(sample_tree)
        hidden = DirectoryScanner(EngineConfig(show_hidden=False)).scan(sample_tree)

        assert any(e.name == ".hidden" for e in shown)
        assert not any(e.name == ".hidden" for e in hidden)


class TestIds:
    """Sequential id assignment."""

    def test_ids_are_sequential(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=True)
        assert [e.id for e in result] == list(range(len(result)))

    def test_child_metadata(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=True)
        by_name = {e.name: e for e in result}

        notes = by_name["notes.txt"]
        assert notes.kind == EntryKind.REGULAR
        assert notes.size_bytes == 5
        assert notes.full_path == str(sample_tree / "notes.txt")
        assert notes.parent_path == str(sample_tree)
        assert by_name["docs"].kind == EntryKind.DIRECTORY

    def test_decode_failure_drops_child_without_consuming_id(
        self, sample_tree: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        real_decode = decoder.decode
        broken = str(sample_tree / "notes.txt")

        def fake_decode(path: str):  # noqa: ANN202
            if path == broken:
                raise NotFoundError("vanished", path=path, operation="stat")
            return real_decode(path)

        with (
            caplog.at_level(logging.WARNING),
            patch("dirctl.listing.scanner.decode", side_effect=fake_decode),
        ):
            result = DirectoryScanner().scan(sample_tree, include_hidden=True)

        assert "notes.txt" not in {e.name for e in result}
        assert [e.id for e in result] == list(range(len(result)))
        assert len(result.warnings) == 1
        assert result.warnings[0].path == broken
        assert "Skipping unreadable entry" in caplog.text


class TestScanFailures:
    """Whole-scan failures."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            DirectoryScanner().scan(tmp_path / "missing")
        assert exc_info.value.operation == "scandir"

    def test_not_a_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(OtherError):
            DirectoryScanner().scan(target)

    def test_permission_denied(self, tmp_path: Path) -> None:
        with (
            patch("dirctl.listing.scanner.os.scandir", side_effect=PermissionError(13, "denied")),
            pytest.raises(PermissionDeniedError),
        ):
            DirectoryScanner().scan(tmp_path)

    def test_relative_path_is_normalized(
        self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(sample_tree.parent)
        result = DirectoryScanner().scan("./tree/docs/..")
        assert result.directory == str(sample_tree)
        assert result[0].full_path == str(sample_tree)


class TestFindById:
    """Tests for find_by_id()."""

    def test_found(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=True)
        entry = find_by_id(result, 2)
        assert entry is not None
        assert entry.id == 2

    def test_not_found(self, sample_tree: Path) -> None:
        result = DirectoryScanner().scan(sample_tree, include_hidden=True)
        assert find_by_id(result, 999) is None

    def test_works_on_plain_lists(self, sample_tree: Path) -> None:
        entries = list(DirectoryScanner().scan(sample_tree))
        assert find_by_id(entries, 0) is entries[0]
