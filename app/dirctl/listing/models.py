"""Listing domain models.

This module defines the immutable records produced by a directory scan:
entry kinds, typed permission bits, the Entry snapshot itself and the
ordered ScanResult returned by the scanner.
"""

import stat
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

SELF_NAME = "."
PARENT_NAME = ".."
SYNTHETIC_NAMES: frozenset[str] = frozenset({SELF_NAME, PARENT_NAME})


class EntryKind(str, Enum):
    """Type of filesystem object.

    Attributes:
        REGULAR: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (live or dangling).
        CHAR_DEVICE: Character device.
        BLOCK_DEVICE: Block device.
        FIFO: Named pipe.
        SOCKET: Unix domain socket.
        UNKNOWN: Any type the OS reports that is not listed above.
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @property
    def glyph(self) -> str:
        """Single character shown in the first column of a permission string."""
        return _KIND_GLYPHS.get(self, "-")

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        """Map the type bits of an st_mode value to an EntryKind."""
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


_KIND_GLYPHS: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
}


@dataclass(frozen=True, slots=True)
class PermissionBits:
    """Permission bits of a filesystem object with named accessors.

    Only the permission part of st_mode is kept (``stat.S_IMODE``), so the
    value can be built from a raw st_mode or from a literal like ``0o1777``.

    Attributes:
        mode: Permission bits (owner/group/other rwx plus special bits).
    """

    mode: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", stat.S_IMODE(self.mode))

    def _has(self, mask: int) -> bool:
        return bool(self.mode & mask)

    def owner_can_read(self) -> bool:
        return self._has(stat.S_IRUSR)

    def owner_can_write(self) -> bool:
        return self._has(stat.S_IWUSR)

    def owner_can_execute(self) -> bool:
        return self._has(stat.S_IXUSR)

    def group_can_read(self) -> bool:
        return self._has(stat.S_IRGRP)

    def group_can_write(self) -> bool:
        return self._has(stat.S_IWGRP)

    def group_can_execute(self) -> bool:
        return self._has(stat.S_IXGRP)

    def other_can_read(self) -> bool:
        return self._has(stat.S_IROTH)

    def other_can_write(self) -> bool:
        return self._has(stat.S_IWOTH)

    def other_can_execute(self) -> bool:
        return self._has(stat.S_IXOTH)

    def sticky(self) -> bool:
        return self._has(stat.S_ISVTX)

    def symbolic(self, kind: EntryKind) -> str:
        """Render the 10-character long-listing permission string.

        The last character is ``t`` whenever the sticky bit is set, whatever
        the other-execute bit says.

        Args:
            kind: Entry kind providing the leading type glyph.

        Returns:
            String like ``drwxr-xr-x`` or ``-rw-r--r--``.
        """
        flags = (
            (self.owner_can_read(), "r"),
            (self.owner_can_write(), "w"),
            (self.owner_can_execute(), "x"),
            (self.group_can_read(), "r"),
            (self.group_can_write(), "w"),
            (self.group_can_execute(), "x"),
            (self.other_can_read(), "r"),
            (self.other_can_write(), "w"),
        )
        body = "".join(char if allowed else "-" for allowed, char in flags)
        if self.sticky():
            last = "t"
        else:
            last = "x" if self.other_can_execute() else "-"
        return f"{kind.glyph}{body}{last}"


@dataclass(frozen=True, slots=True)
class EntryMetadata:
    """Decoded filesystem status of one path.

    Attributes:
        kind: Object type (from lstat, so links report SYMLINK).
        permissions: Permission bits.
        link_count: Number of hard links.
        owner_id: Numeric user id.
        owner_name: User name, empty if the id has no passwd record.
        group_id: Numeric group id.
        group_name: Group name, empty if the id has no group record.
        size_bytes: Size in bytes.
        modified_at: Local modification time, None when unavailable.
    """

    kind: EntryKind
    permissions: PermissionBits
    link_count: int
    owner_id: int
    owner_name: str
    group_id: int
    group_name: str
    size_bytes: int
    modified_at: datetime | None

    @classmethod
    def empty(cls, kind: EntryKind = EntryKind.UNKNOWN) -> "EntryMetadata":
        """Best-effort placeholder for a path whose status could not be read."""
        return cls(
            kind=kind,
            permissions=PermissionBits(0),
            link_count=0,
            owner_id=-1,
            owner_name="",
            group_id=-1,
            group_name="",
            size_bytes=0,
            modified_at=None,
        )


@dataclass(frozen=True, slots=True)
class Entry:
    """Immutable snapshot of one filesystem object from a single scan.

    Mutation operations act on ``full_path`` and ``parent_path``; an Entry
    is never updated, callers re-scan to observe changes.

    Attributes:
        id: Sequence number, unique within one scan only.
        name: Base name, or "." / ".." for the synthetic entries.
        full_path: Absolute normalized path of the object.
        parent_path: Absolute path of the directory being listed.
        metadata: Decoded filesystem status at scan time.
    """

    id: int
    name: str
    full_path: str
    parent_path: str
    metadata: EntryMetadata

    @property
    def kind(self) -> EntryKind:
        return self.metadata.kind

    @property
    def permissions(self) -> PermissionBits:
        return self.metadata.permissions

    @property
    def link_count(self) -> int:
        return self.metadata.link_count

    @property
    def owner_id(self) -> int:
        return self.metadata.owner_id

    @property
    def owner_name(self) -> str:
        return self.metadata.owner_name

    @property
    def group_id(self) -> int:
        return self.metadata.group_id

    @property
    def group_name(self) -> str:
        return self.metadata.group_name

    @property
    def size_bytes(self) -> int:
        return self.metadata.size_bytes

    @property
    def modified_at(self) -> datetime | None:
        return self.metadata.modified_at

    @property
    def is_directory(self) -> bool:
        return self.metadata.kind == EntryKind.DIRECTORY

    @property
    def is_synthetic(self) -> bool:
        """True for the "." and ".." entries."""
        return self.name in SYNTHETIC_NAMES

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(frozen=True, slots=True)
class ScanWarning:
    """Non-fatal problem encountered while scanning.

    Attributes:
        path: Path that could not be decoded.
        message: Human-readable description of the failure.
    """

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Ordered entries produced by one scan.

    Order is discovery order: ".", "..", then children in the order the
    OS enumerated them. Callers may sort a copy.

    Attributes:
        directory: Absolute path of the scanned directory.
        entries: Entries in discovery order.
        warnings: Non-fatal problems (dropped children, unreadable parent).
    """

    directory: str
    entries: tuple[Entry, ...]
    warnings: tuple[ScanWarning, ...] = ()

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def find_by_id(self, entry_id: int) -> Entry | None:
        """Return the entry with the given id, or None."""
        return find_by_id(self.entries, entry_id)

    def total_size(self) -> int:
        """Sum of child sizes in bytes, excluding "." and ".."."""
        return sum(entry.size_bytes for entry in self.entries if not entry.is_synthetic)


def find_by_id(entries: Iterable[Entry], entry_id: int) -> Entry | None:
    """Find an entry by id in any sequence of entries.

    Args:
        entries: Entries to search (a ScanResult or a list).
        entry_id: Id to look for.

    Returns:
        The matching Entry, or None if no entry has that id.
    """
    for entry in entries:
        if entry.id == entry_id:
            return entry
    return None
