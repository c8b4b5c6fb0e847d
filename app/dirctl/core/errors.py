"""Typed errors raised by the listing and mutation engine.

Every engine failure is a DirctlError carrying an ErrorKind, the path the
failure happened on and the operation that was attempted, so callers can
present a message without inspecting OS error numbers.
"""

import errno
from enum import Enum


class ErrorKind(str, Enum):
    """Classification of engine failures.

    Attributes:
        NOT_FOUND: Path does not exist.
        PERMISSION_DENIED: Access was refused by the OS.
        ALREADY_EXISTS: Target path is already occupied.
        INVALID_OPERATION: Request refused before touching the filesystem.
        OTHER: Any other OS-level failure.
    """

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    INVALID_OPERATION = "invalid_operation"
    OTHER = "other"


class DirctlError(Exception):
    """Base class for all engine errors.

    Attributes:
        kind: Error classification.
        path: Path the failing operation acted on.
        operation: Name of the attempted operation (e.g. "stat", "unlink").
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, *, path: str | None = None, operation: str | None = None):
        super().__init__(message)
        self.path = path
        self.operation = operation


class NotFoundError(DirctlError):
    kind = ErrorKind.NOT_FOUND


class PermissionDeniedError(DirctlError):
    kind = ErrorKind.PERMISSION_DENIED


class AlreadyExistsError(DirctlError):
    kind = ErrorKind.ALREADY_EXISTS


class InvalidOperationError(DirctlError):
    kind = ErrorKind.INVALID_OPERATION


class OtherError(DirctlError):
    kind = ErrorKind.OTHER


def from_os_error(exc: OSError, path: str, operation: str) -> DirctlError:
    """Map an OSError to the matching typed engine error.

    The returned error is meant to be raised with ``from exc`` so the
    original traceback stays attached.

    Args:
        exc: The OS failure.
        path: Path the operation acted on.
        operation: Name of the attempted operation.

    Returns:
        Typed DirctlError instance (not raised).
    """
    reason = exc.strerror or str(exc)
    message = f"{operation} {path}: {reason}"

    if isinstance(exc, FileNotFoundError):
        return NotFoundError(message, path=path, operation=operation)
    if isinstance(exc, PermissionError) or exc.errno == errno.EPERM:
        return PermissionDeniedError(message, path=path, operation=operation)
    if isinstance(exc, FileExistsError):
        return AlreadyExistsError(message, path=path, operation=operation)
    return OtherError(message, path=path, operation=operation)
