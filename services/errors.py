"""Error kinds raised by the backup/restore flows.

Every error carries an ``ErrorKind`` so the CLI can map it to an exit code
without caring which layer raised it.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_REJECTED = "store_rejected"
    MALFORMED_ASSIGNMENT = "malformed_assignment"
    FILE_NOT_FOUND = "file_not_found"
    IO_FAILURE = "io_failure"


class BackupRestoreError(Exception):
    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class StoreUnavailable(BackupRestoreError):
    """The metadata store could not be reached or read."""
    kind = ErrorKind.STORE_UNAVAILABLE


class StoreRejected(BackupRestoreError):
    """The metadata store refused the assignment payload."""
    kind = ErrorKind.STORE_REJECTED


class MalformedAssignment(BackupRestoreError):
    kind = ErrorKind.MALFORMED_ASSIGNMENT


class AssignmentFileNotFound(BackupRestoreError):
    kind = ErrorKind.FILE_NOT_FOUND


class IOFailure(BackupRestoreError):
    kind = ErrorKind.IO_FAILURE
