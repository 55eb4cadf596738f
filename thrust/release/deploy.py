"""The full release: clean-tree check, upload, deployment tag."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from thrust.core.result import Err, Ok
from thrust.output.console import ConsoleProtocol
from thrust.release.history import TagResolver
from thrust.release.upload import UploadOutcome, UploadPipeline

__all__ = ["DeployFlow", "DeployRequest"]


@dataclass(frozen=True, slots=True)
class DeployRequest:
    environment: str
    artifact: Path
    distribution_list: str
    notify: bool | None = None
    autogenerate_notes: bool = False
    symbol_bundle: Path | None = None


class DeployFlow:
    def __init__(
        self,
        *,
        resolver: TagResolver,
        pipeline: UploadPipeline,
        console: ConsoleProtocol,
    ) -> None:
        self._resolver = resolver
        self._pipeline = pipeline
        self._console = console

    def deploy(self, request: DeployRequest) -> UploadOutcome:
        """Upload the artifact and, on success, tag HEAD for the environment.

        The tag is only created after the service accepted the build, so a
        rejected upload leaves the deployment history untouched.
        """
        self._console.header(f"Deploying {request.artifact.name} to {request.environment}")
        clean = self._resolver.ensure_clean_tree()
        if isinstance(clean, Err):
            return clean

        uploaded = self._pipeline.upload(
            request.artifact,
            request.notify,
            request.distribution_list,
            request.autogenerate_notes,
            request.environment,
            request.symbol_bundle,
        )
        if isinstance(uploaded, Err):
            return uploaded

        tagged = self._resolver.tag_deployment(request.environment)
        if isinstance(tagged, Err):
            return tagged

        self._console.print(f"Tagged deployment to {request.environment}")
        return Ok(uploaded.value)
