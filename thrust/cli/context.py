from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from thrust.core.config import CONFIG_FILENAME, ThrustConfig, load_config_or_default
from thrust.core.errors import ErrorCode
from thrust.core.result import Err
from thrust.git.repository import GitRepository
from thrust.git.tags import AutotagLister
from thrust.output.console import ConsoleProtocol, RichConsole
from thrust.platform.process import CommandRunner, SubprocessRunner
from thrust.release.deploy import DeployFlow
from thrust.release.history import TagResolver
from thrust.release.notes import NotesGenerator
from thrust.release.prompt import TextPrompt, UserPrompt
from thrust.release.transport import CurlTransport, UploadTransport
from thrust.release.upload import UploadPipeline

ROOT_ENV = "THRUST_ROOT"
CONFIG_ENV = "THRUST_CONFIG"


def _ask(label: str) -> str:
    return typer.prompt(label.rstrip().rstrip(":"), default="", show_default=False)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Everything a command needs, wired once per invocation."""

    root: Path
    config: ThrustConfig
    console: ConsoleProtocol
    runner: CommandRunner
    prompt: UserPrompt
    transport: UploadTransport

    def resolver(self) -> TagResolver:
        return TagResolver(runner=self.runner, tags=AutotagLister(self.runner), console=self.console)

    def notes(self) -> NotesGenerator:
        return NotesGenerator(git=GitRepository(self.runner), resolver=self.resolver())

    def pipeline(self) -> UploadPipeline:
        service = self.config.testflight
        return UploadPipeline(
            runner=self.runner,
            transport=self.transport,
            notes=self.notes(),
            prompt=self.prompt,
            console=self.console,
            api_token=service.api_token,
            team_token=service.team_token,
            url=service.url,
        )

    def deploy_flow(self) -> DeployFlow:
        return DeployFlow(resolver=self.resolver(), pipeline=self.pipeline(), console=self.console)


def build_context() -> CLIContext:
    root = Path(os.environ.get(ROOT_ENV) or Path.cwd()).expanduser().resolve()
    config_path = Path(os.environ.get(CONFIG_ENV) or root / CONFIG_FILENAME)

    loaded = load_config_or_default(config_path)
    if isinstance(loaded, Err):
        typer.echo(f"error: {loaded.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    runner = SubprocessRunner(cwd=root)
    return CLIContext(
        root=root,
        config=loaded.value,
        console=RichConsole(),
        runner=runner,
        prompt=TextPrompt(_ask),
        transport=CurlTransport(runner),
    )
