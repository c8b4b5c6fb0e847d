"""dirctl - directory listing and file management engine.

Exports the engine surface: scanning, formatting and mutation of
directory entries.
"""

from dirctl.core.config import EngineConfig
from dirctl.core.errors import (
    AlreadyExistsError,
    DirctlError,
    ErrorKind,
    InvalidOperationError,
    NotFoundError,
    OtherError,
    PermissionDeniedError,
)
from dirctl.listing.formatter import EntryFormatter, FormattedEntry, StyledSegment
from dirctl.listing.models import Entry, EntryKind, PermissionBits, ScanResult, find_by_id
from dirctl.listing.scanner import DirectoryScanner
from dirctl.operations.operator import FileOperator

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "DirctlError",
    "DirectoryScanner",
    "EngineConfig",
    "Entry",
    "EntryFormatter",
    "EntryKind",
    "ErrorKind",
    "FileOperator",
    "FormattedEntry",
    "InvalidOperationError",
    "NotFoundError",
    "OtherError",
    "PermissionBits",
    "PermissionDeniedError",
    "ScanResult",
    "StyledSegment",
    "__version__",
    "find_by_id",
]
