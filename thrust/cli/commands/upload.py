"""upload / deploy commands."""

from __future__ import annotations

from pathlib import Path

import typer

from thrust.cli.commands._helpers import exit_release
from thrust.cli.context import CLIContext, build_context
from thrust.core.errors import ErrorCode
from thrust.core.result import Err
from thrust.release.deploy import DeployRequest


def _request(
    ctx: CLIContext,
    *,
    environment: str,
    artifact: Path,
    dsym: Path | None,
    notify: bool | None,
    distribution_list: str | None,
    autogenerate_notes: bool | None,
) -> DeployRequest:
    env_config = ctx.config.environment(environment)
    return DeployRequest(
        environment=environment,
        artifact=artifact,
        distribution_list=distribution_list or env_config.distribution_list,
        notify=env_config.notify if notify is None else notify,
        autogenerate_notes=(
            env_config.autogenerate_notes if autogenerate_notes is None else autogenerate_notes
        ),
        symbol_bundle=dsym,
    )


_ENVIRONMENT = typer.Argument(..., help="Deployment environment, e.g. staging.")
_ARTIFACT = typer.Argument(..., help="Built .ipa to upload.")
_DSYM = typer.Option(None, "--dsym", help="dSYM bundle to zip and attach.")
_NOTIFY = typer.Option(None, "--notify/--no-notify", help="Notify testers (NOTIFY env wins).")
_DIST_LIST = typer.Option(None, "--distribution-list", "-d", help="Tester group to release to.")
_AUTOGEN = typer.Option(
    None,
    "--autogenerate-notes/--prompt-notes",
    help="Build notes from commits since the last deploy, or ask for them.",
)


def upload(
    environment: str = _ENVIRONMENT,
    artifact: Path = _ARTIFACT,
    dsym: Path | None = _DSYM,
    notify: bool | None = _NOTIFY,
    distribution_list: str | None = _DIST_LIST,
    autogenerate_notes: bool | None = _AUTOGEN,
) -> None:
    """Upload a build with deploy notes, without tagging."""
    ctx = build_context()
    if not artifact.exists():
        ctx.console.error(f"error: artifact not found: {artifact}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    req = _request(
        ctx,
        environment=environment,
        artifact=artifact,
        dsym=dsym,
        notify=notify,
        distribution_list=distribution_list,
        autogenerate_notes=autogenerate_notes,
    )
    result = ctx.pipeline().upload(
        req.artifact,
        req.notify,
        req.distribution_list,
        req.autogenerate_notes,
        req.environment,
        req.symbol_bundle,
    )
    if isinstance(result, Err):
        exit_release(result.error, ctx)


def deploy(
    environment: str = _ENVIRONMENT,
    artifact: Path = _ARTIFACT,
    dsym: Path | None = _DSYM,
    notify: bool | None = _NOTIFY,
    distribution_list: str | None = _DIST_LIST,
    autogenerate_notes: bool | None = _AUTOGEN,
) -> None:
    """Check the working tree, upload the build and tag the deployment."""
    ctx = build_context()
    if not artifact.exists():
        ctx.console.error(f"error: artifact not found: {artifact}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    req = _request(
        ctx,
        environment=environment,
        artifact=artifact,
        dsym=dsym,
        notify=notify,
        distribution_list=distribution_list,
        autogenerate_notes=autogenerate_notes,
    )
    result = ctx.deploy_flow().deploy(req)
    if isinstance(result, Err):
        exit_release(result.error, ctx)
