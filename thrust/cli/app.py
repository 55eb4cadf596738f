from __future__ import annotations

import os
from pathlib import Path

import typer

from thrust import __version__
from thrust.cli.commands.history import checkout, last_deploy, notes
from thrust.cli.commands.upload import deploy, upload
from thrust.cli.context import CONFIG_ENV, ROOT_ENV
from thrust.core.errors import ErrorCode

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(upload)
app.command()(deploy)
app.command()(notes)
app.command("last-deploy")(last_deploy)
app.command()(checkout)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    root: Path | None = typer.Option(None, "--root", help="Repository root (default: cwd)."),
    config: Path | None = typer.Option(None, "--config", help="Config file (default: <root>/thrust.toml)."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if root is not None:
        resolved = root.expanduser().resolve()
        if not resolved.is_dir():
            typer.echo(f"error: not a directory: {resolved}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ[ROOT_ENV] = str(resolved)

    if config is not None:
        os.environ[CONFIG_ENV] = str(config.expanduser().resolve())


def main() -> None:
    app()
