"""File operator: create, rename and delete.

All operations act on the live filesystem and keep no state between
calls; callers re-scan to observe the result. The synthetic "." and ".."
entries are refused before any filesystem access.
"""

import logging
import os
from collections.abc import Callable

from dirctl.core.config import EngineConfig
from dirctl.core.errors import AlreadyExistsError, InvalidOperationError, from_os_error
from dirctl.core.paths import join_paths
from dirctl.listing.models import SYNTHETIC_NAMES, Entry, EntryKind

logger = logging.getLogger(__name__)


class FileOperator:
    """Performs create, rename and delete operations.

    Supports dry-run mode, in which every operation is logged and
    validated but the filesystem is left untouched.

    Attributes:
        _config: Engine configuration (separator, creation modes).
        _dry_run: If True, simulate operations without modifying the filesystem.
    """

    def __init__(self, config: EngineConfig | None = None, dry_run: bool = False) -> None:
        """Initialize the FileOperator.

        Args:
            config: Engine configuration. Defaults to EngineConfig().
            dry_run: If True, report what would be done without doing it.
        """
        self._config = config or EngineConfig()
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def create(self, directory_hint: str, name: str) -> str:
        """Create an empty file, or a directory when name ends with the separator.

        Directories are created single-level with ``config.dir_mode``;
        files are created exclusively with ``config.file_mode``. The mode
        is applied explicitly so the process umask does not alter it.

        Args:
            directory_hint: Directory to create the new object in.
            name: Name of the new object; a trailing separator means directory.

        Returns:
            Path of the created object.

        Raises:
            InvalidOperationError: Name is empty, "." or "..".
            AlreadyExistsError: Something already occupies the path.
            NotFoundError: directory_hint (or an intermediate directory) is missing.
            PermissionDeniedError: Access refused.
            OtherError: Any other OS failure.
        """
        separator = self._config.path_separator
        is_directory = name.endswith(separator)
        bare_name = name.removesuffix(separator)
        if not bare_name or bare_name in SYNTHETIC_NAMES:
            msg = f"Cannot create {name!r}"
            raise InvalidOperationError(msg, path=directory_hint, operation="create")

        path = join_paths(separator, directory_hint, bare_name)

        if self._dry_run:
            kind = "directory" if is_directory else "file"
            logger.info("Dry-run: would create %s %s", kind, path)
            return path

        if is_directory:
            self._make_directory(path)
        else:
            self._make_file(path)
        return path

    def rename(self, entry: Entry, new_name: str, overwrite: bool = False) -> str:
        """Rename an entry within its parent directory.

        The destination is ``join(entry.parent_path, new_name)``. An
        existing destination is refused unless ``overwrite`` is set, in
        which case it is atomically replaced.

        Args:
            entry: Entry to rename.
            new_name: New name (may contain separators to move into a subdirectory).
            overwrite: Replace an existing destination.

        Returns:
            The new path.

        Raises:
            InvalidOperationError: Entry is "." or "..", or new_name is empty.
            AlreadyExistsError: Destination exists and overwrite is False.
            NotFoundError: Source vanished since the scan.
            PermissionDeniedError: Access refused.
            OtherError: Any other OS failure.
        """
        self._refuse_synthetic(entry, "rename")
        if not new_name:
            msg = f"New name for {entry.full_path} cannot be empty"
            raise InvalidOperationError(msg, path=entry.full_path, operation="rename")

        new_path = join_paths(self._config.path_separator, entry.parent_path, new_name)

        if not overwrite and os.path.lexists(new_path):
            msg = f"Cannot rename {entry.full_path} to {new_path}: destination exists"
            raise AlreadyExistsError(msg, path=new_path, operation="rename")

        if self._dry_run:
            logger.info("Dry-run: would rename %s to %s", entry.full_path, new_path)
            return new_path

        try:
            if overwrite:
                os.replace(entry.full_path, new_path)
            else:
                os.rename(entry.full_path, new_path)
        except OSError as e:
            raise from_os_error(e, entry.full_path, "rename") from e

        logger.info("Renamed %s to %s", entry.full_path, new_path)
        return new_path

    def delete(self, entry: Entry) -> None:
        """Delete an entry; directories are removed recursively.

        Non-directory kinds (symlinks to directories included) are
        unlinked. A directory is emptied depth-first and then removed.
        The first failure aborts the operation; anything deleted before
        it stays deleted.

        Args:
            entry: Entry to delete.

        Raises:
            InvalidOperationError: Entry is "." or "..".
            NotFoundError: Path (or a descendant) vanished.
            PermissionDeniedError: Access refused on the path or a descendant.
            OtherError: Any other OS failure.
        """
        self._refuse_synthetic(entry, "delete")

        if self._dry_run:
            logger.info("Dry-run: would delete %s", entry.full_path)
            return

        if entry.kind == EntryKind.DIRECTORY:
            self._delete_tree(entry.full_path)
        else:
            self._unlink(entry.full_path)
        logger.info("Deleted %s", entry.full_path)

    # === Private helpers ===

    @staticmethod
    def _refuse_synthetic(entry: Entry, operation: str) -> None:
        if entry.name in SYNTHETIC_NAMES:
            msg = f'Cannot {operation} "{entry.full_path}"'
            raise InvalidOperationError(msg, path=entry.full_path, operation=operation)

    def _make_directory(self, path: str) -> None:
        try:
            os.mkdir(path, self._config.dir_mode)
        except OSError as e:
            raise from_os_error(e, path, "mkdir") from e
        try:
            os.chmod(path, self._config.dir_mode)
        except OSError as e:
            self._discard(path, os.rmdir)
            raise from_os_error(e, path, "chmod") from e
        logger.info("Created directory %s", path)

    def _make_file(self, path: str) -> None:
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, self._config.file_mode)
        except OSError as e:
            raise from_os_error(e, path, "create") from e
        try:
            os.fchmod(fd, self._config.file_mode)
        except OSError as e:
            os.close(fd)
            self._discard(path, os.unlink)
            raise from_os_error(e, path, "chmod") from e
        os.close(fd)
        logger.info("Created file %s", path)

    @staticmethod
    def _discard(path: str, remove: Callable[[str], None]) -> None:
        """Remove a half-created entry so the create can be retried."""
        try:
            remove(path)
        except OSError as e:
            logger.warning("Could not remove %s after failed create: %s", path, e)

    def _delete_tree(self, path: str) -> None:
        """Remove a directory depth-first, stopping at the first failure."""
        try:
            with os.scandir(path) as it:
                children = [(child.name, child.is_dir(follow_symlinks=False)) for child in it]
        except OSError as e:
            raise from_os_error(e, path, "scandir") from e

        for name, is_dir in children:
            child_path = join_paths(self._config.path_separator, path, name)
            if is_dir:
                self._delete_tree(child_path)
            else:
                self._unlink(child_path)

        try:
            os.rmdir(path)
        except OSError as e:
            raise from_os_error(e, path, "rmdir") from e

    @staticmethod
    def _unlink(path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise from_os_error(e, path, "unlink") from e
