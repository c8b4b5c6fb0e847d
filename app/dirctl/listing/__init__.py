"""Directory listing: metadata decoding, scanning and formatting."""

from dirctl.listing.formatter import EntryFormatter, FormattedEntry, StyledSegment
from dirctl.listing.models import (
    Entry,
    EntryKind,
    EntryMetadata,
    PermissionBits,
    ScanResult,
    ScanWarning,
    find_by_id,
)
from dirctl.listing.scanner import DirectoryScanner

__all__ = [
    "DirectoryScanner",
    "Entry",
    "EntryFormatter",
    "EntryKind",
    "EntryMetadata",
    "FormattedEntry",
    "PermissionBits",
    "ScanResult",
    "ScanWarning",
    "StyledSegment",
    "find_by_id",
]
