"""Commands reading deployment history."""

from __future__ import annotations

import typer

from thrust.cli.commands._helpers import exit_release
from thrust.cli.context import build_context
from thrust.core.result import Err


def notes(environment: str = typer.Argument(..., help="Deployment environment.")) -> None:
    """Write deploy notes since the last deploy and print the file path."""
    ctx = build_context()
    result = ctx.notes().generate_notes(environment)
    if isinstance(result, Err):
        exit_release(result.error, ctx)
    typer.echo(str(result.value))


def last_deploy(environment: str = typer.Argument(..., help="Deployment environment.")) -> None:
    """Show the commit last deployed to an environment."""
    ctx = build_context()
    result = ctx.notes().notes_for_summary(environment)
    if isinstance(result, Err):
        exit_release(result.error, ctx)
    ctx.console.print(result.value)


def checkout(label: str = typer.Argument(..., help="Tag label, e.g. ci.")) -> None:
    """Check out the most recent tag for a label."""
    ctx = build_context()
    result = ctx.resolver().checkout_tag(label)
    if isinstance(result, Err):
        exit_release(result.error, ctx)
    ctx.console.success(f"checked out {result.value}")
