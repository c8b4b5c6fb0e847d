"""Tests for engine error types and OS error mapping."""

import errno

import pytest
from dirctl.core.errors import (
    AlreadyExistsError,
    DirctlError,
    ErrorKind,
    InvalidOperationError,
    NotFoundError,
    OtherError,
    PermissionDeniedError,
    from_os_error,
)


class TestFromOsError:
    """Tests for from_os_error()."""

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (FileNotFoundError(errno.ENOENT, "No such file or directory"), NotFoundError),
            (PermissionError(errno.EACCES, "Permission denied"), PermissionDeniedError),
            (OSError(errno.EPERM, "Operation not permitted"), PermissionDeniedError),
            (FileExistsError(errno.EEXIST, "File exists"), AlreadyExistsError),
            (NotADirectoryError(errno.ENOTDIR, "Not a directory"), OtherError),
            (OSError(errno.EIO, "Input/output error"), OtherError),
        ],
    )
    def test_mapping(self, exc: OSError, expected: type[DirctlError]) -> None:
        error = from_os_error(exc, "/tmp/x", "stat")
        assert type(error) is expected

    def test_message_path_and_operation(self) -> None:
        error = from_os_error(FileNotFoundError(errno.ENOENT, "No such file"), "/a/b", "unlink")

        assert str(error) == "unlink /a/b: No such file"
        assert error.path == "/a/b"
        assert error.operation == "unlink"
        assert error.kind == ErrorKind.NOT_FOUND

    def test_message_without_strerror(self) -> None:
        error = from_os_error(OSError("odd failure"), "/a", "rmdir")
        assert "odd failure" in str(error)


class TestErrorKinds:
    """Each error class carries its kind."""

    @pytest.mark.parametrize(
        ("cls", "kind"),
        [
            (NotFoundError, ErrorKind.NOT_FOUND),
            (PermissionDeniedError, ErrorKind.PERMISSION_DENIED),
            (AlreadyExistsError, ErrorKind.ALREADY_EXISTS),
            (InvalidOperationError, ErrorKind.INVALID_OPERATION),
            (OtherError, ErrorKind.OTHER),
        ],
    )
    def test_kind(self, cls: type[DirctlError], kind: ErrorKind) -> None:
        error = cls("boom")
        assert error.kind == kind
        assert isinstance(error, DirctlError)
        assert error.path is None
