"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from thrust.core.errors import ErrorCode
from thrust.output.console import Style
from thrust.release.errors import ReleaseError, UploadRejected

if TYPE_CHECKING:
    from thrust.cli.context import CLIContext


def release_error_code(kind: str) -> ErrorCode:
    if kind == "command_failed":
        return ErrorCode.COMMAND_ERROR
    if kind == "dirty_tree":
        return ErrorCode.ENV_ERROR
    if kind == "io_failed":
        return ErrorCode.IO_ERROR
    return ErrorCode.USER_ERROR


def exit_release(error: ReleaseError | UploadRejected, ctx: CLIContext) -> NoReturn:
    """Report ``error`` and leave with the matching exit code.

    Rejected uploads were already reported by the pipeline, so they only set
    the exit code.
    """
    if isinstance(error, UploadRejected):
        raise typer.Exit(code=int(ErrorCode.UPLOAD_ERROR))

    ctx.console.error(f"error: {error.message}")
    if error.hint:
        ctx.console.print(f"hint: {error.hint}", Style.DIM)
    raise typer.Exit(code=int(release_error_code(error.kind)))
