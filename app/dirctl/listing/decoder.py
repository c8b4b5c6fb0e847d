"""Filesystem metadata decoder.

Turns the raw status of a path into an EntryMetadata record: object
kind, permission bits, link count, owner and group identity, size and
modification time.
"""

import grp
import logging
import os
import pwd
from datetime import datetime

from dirctl.core.errors import from_os_error
from dirctl.listing.models import EntryKind, EntryMetadata, PermissionBits

logger = logging.getLogger(__name__)


def lookup_user(uid: int) -> str:
    """Resolve a user id to a name, empty string if unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        logger.debug("No passwd entry for uid %d", uid)
        return ""


def lookup_group(gid: int) -> str:
    """Resolve a group id to a name, empty string if unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        logger.debug("No group entry for gid %d", gid)
        return ""


def decode(path: str) -> EntryMetadata:
    """Decode the filesystem status of a path.

    The kind is taken from ``lstat`` so symbolic links are reported as
    SYMLINK. Everything else follows the link, like a long listing does
    for size and permissions. When the link target cannot be resolved
    (dangling link, loop), the link's own status is used instead.

    Args:
        path: Path to decode.

    Returns:
        EntryMetadata for the path.

    Raises:
        NotFoundError: Path does not exist.
        PermissionDeniedError: Status access was refused.
        OtherError: Any other OS failure.
    """
    try:
        link_status = os.lstat(path)
    except OSError as e:
        raise from_os_error(e, path, "stat") from e

    kind = EntryKind.from_mode(link_status.st_mode)
    status = link_status
    if kind == EntryKind.SYMLINK:
        try:
            status = os.stat(path)
        except OSError as e:
            logger.debug("Cannot follow link %s: %s", path, e)

    return EntryMetadata(
        kind=kind,
        permissions=PermissionBits(status.st_mode),
        link_count=status.st_nlink,
        owner_id=status.st_uid,
        owner_name=lookup_user(status.st_uid),
        group_id=status.st_gid,
        group_name=lookup_group(status.st_gid),
        size_bytes=status.st_size,
        modified_at=datetime.fromtimestamp(status.st_mtime),
    )
