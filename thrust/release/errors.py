"""Error payloads of the release flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from thrust.platform.process import ProcessError

__all__ = ["ReleaseError", "ReleaseErrorKind", "UploadRejected", "command_failed"]

ReleaseErrorKind = Literal[
    "command_failed",
    "dirty_tree",
    "invalid_input",
    "io_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """A release step could not complete.

    Attributes:
        kind: Failure category, mapped to an exit code by the CLI
        message: One-line description
        hint: Extra detail such as stderr of the failed command
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


@dataclass(frozen=True, slots=True)
class UploadRejected:
    """The distribution service answered with a non-200 status."""

    status_code: int
    message: str

    def banner(self) -> str:
        return f"******** Upload Failed: {self.message} ********"

    def __str__(self) -> str:
        return self.banner()


def command_failed(error: ProcessError) -> ReleaseError:
    """Wrap a failed subprocess as a release error."""
    return ReleaseError(
        kind="command_failed",
        message=str(error),
        hint=error.stderr.strip() or None,
    )
