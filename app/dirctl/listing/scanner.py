"""Directory scanner.

Enumerates the immediate children of a directory, applies the
hidden-file filter, and builds the ordered ScanResult with the synthetic
"." and ".." entries at ids 0 and 1.
"""

import dataclasses
import logging
import os

from dirctl.core.config import EngineConfig
from dirctl.core.errors import DirctlError, from_os_error
from dirctl.core.paths import join_paths, normalize_path, parent_of
from dirctl.listing.decoder import decode
from dirctl.listing.models import (
    PARENT_NAME,
    SELF_NAME,
    Entry,
    EntryKind,
    EntryMetadata,
    ScanResult,
    ScanWarning,
)

logger = logging.getLogger(__name__)

SELF_ID = 0
PARENT_ID = 1
FIRST_CHILD_ID = 2


class DirectoryScanner:
    """Builds ScanResults for directories.

    Args:
        config: Engine configuration (separator, hidden-file default).
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    def scan(
        self,
        directory: str | os.PathLike[str],
        include_hidden: bool | None = None,
    ) -> ScanResult:
        """Scan a directory and return its entries in discovery order.

        The directory must be enumerable, otherwise the whole scan fails.
        Children that cannot be decoded are dropped and reported as
        warnings; they do not consume an id. The parent entry is always
        present, with empty metadata if its status cannot be read.

        Args:
            directory: Directory to list.
            include_hidden: Include names starting with ".". None uses
                ``config.show_hidden``.

        Returns:
            ScanResult with ".", "..", then accepted children.

        Raises:
            NotFoundError: Directory does not exist.
            PermissionDeniedError: Directory cannot be read.
            OtherError: Any other OS failure (e.g. not a directory).
        """
        path = normalize_path(directory)
        show_hidden = self._config.show_hidden if include_hidden is None else include_hidden

        names = self._list_names(path)
        warnings: list[ScanWarning] = []

        entries: list[Entry] = [
            self._self_entry(path),
            self._parent_entry(path, warnings),
        ]

        next_id = FIRST_CHILD_ID
        for name in names:
            if not show_hidden and name.startswith("."):
                continue

            child_path = join_paths(self._config.path_separator, path, name)
            try:
                metadata = decode(child_path)
            except DirctlError as e:
                logger.warning("Skipping unreadable entry %s: %s", child_path, e)
                warnings.append(ScanWarning(path=child_path, message=str(e)))
                continue

            entries.append(
                Entry(
                    id=next_id,
                    name=name,
                    full_path=child_path,
                    parent_path=path,
                    metadata=metadata,
                )
            )
            next_id += 1

        return ScanResult(directory=path, entries=tuple(entries), warnings=tuple(warnings))

    @staticmethod
    def _list_names(path: str) -> list[str]:
        try:
            with os.scandir(path) as it:
                return [dir_entry.name for dir_entry in it]
        except OSError as e:
            raise from_os_error(e, path, "scandir") from e

    def _self_entry(self, path: str) -> Entry:
        metadata = dataclasses.replace(decode(path), kind=EntryKind.DIRECTORY)
        return Entry(
            id=SELF_ID,
            name=SELF_NAME,
            full_path=path,
            parent_path=path,
            metadata=metadata,
        )

    def _parent_entry(self, path: str, warnings: list[ScanWarning]) -> Entry:
        parent = parent_of(path)
        try:
            metadata = decode(parent)
        except DirctlError as e:
            logger.warning("Cannot read parent directory %s: %s", parent, e)
            warnings.append(ScanWarning(path=parent, message=str(e)))
            metadata = EntryMetadata.empty()
        return Entry(
            id=PARENT_ID,
            name=PARENT_NAME,
            full_path=parent,
            parent_path=path,
            metadata=dataclasses.replace(metadata, kind=EntryKind.DIRECTORY),
        )

