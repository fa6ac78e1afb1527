"""
Packaging errors — the four ways a packaging helper can fail.

Every helper collapses whatever went wrong underneath (missing binary,
permission problem, non-zero exit, I/O error) into exactly one of these
kinds. The original exception stays reachable through ``__cause__`` for
diagnostics, but callers only ever branch on the kind.

None of these are recoverable: the build step is expected to halt.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Tag identifying which packaging step failed."""

    COMMAND_UNAVAILABLE = "command_unavailable"
    INVALID_EXIT_VALUE = "invalid_exit_value"
    SCRIPT_WRITE_FAILED = "script_write_failed"
    MAN_PAGE_WRITE_FAILED = "man_page_write_failed"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.COMMAND_UNAVAILABLE: (
        "The command has returned an invalid exit value. Chances are the "
        "command is not available in the system path. Make sure the command "
        "exists and try again. The application will halt now."
    ),
    ErrorKind.INVALID_EXIT_VALUE: (
        "The command call has returned an invalid exit value. Chances are "
        "the arguments are incorrect. Make sure the call contains valid "
        "arguments and try again."
    ),
    ErrorKind.SCRIPT_WRITE_FAILED: (
        "I could not create the shell script for checkcites due to an IO "
        "error. Please make sure the current directory has the correct "
        "permissions and try again. The application will halt now."
    ),
    ErrorKind.MAN_PAGE_WRITE_FAILED: (
        "I could not create the man page for checkcites due to an IO error. "
        "Please make sure the current directory has the correct permissions "
        "and try again. The application will halt now."
    ),
}


class PackagingError(Exception):
    """Base class for every packaging helper failure.

    Subclasses pin ``kind``; the message defaults to the user-facing
    guidance for that kind.
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None, *, detail: str = "") -> None:
        self.detail = detail
        super().__init__(message or _MESSAGES[self.kind])

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.detail:
            data["detail"] = self.detail
        return data


class CommandUnavailable(PackagingError):
    """A probed command could not be run."""

    kind = ErrorKind.COMMAND_UNAVAILABLE

    def __init__(self, command: str = "", *, detail: str = "") -> None:
        self.command = command
        super().__init__(detail=detail)


class InvalidExitValue(PackagingError):
    """A spawned process failed to start or exited abnormally."""

    kind = ErrorKind.INVALID_EXIT_VALUE

    def __init__(
        self,
        call: list[str] | None = None,
        *,
        returncode: int | None = None,
        stderr: str = "",
        detail: str = "",
    ) -> None:
        self.call = list(call or [])
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(detail=detail)


class ScriptWriteFailed(PackagingError):
    """The launcher script could not be written."""

    kind = ErrorKind.SCRIPT_WRITE_FAILED


class ManPageWriteFailed(PackagingError):
    """The man page could not be written."""

    kind = ErrorKind.MAN_PAGE_WRITE_FAILED
