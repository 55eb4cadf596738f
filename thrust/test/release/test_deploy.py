"""Tests for thrust.release.deploy."""

from __future__ import annotations

from pathlib import Path

from thrust.core.result import Err, Ok
from thrust.git.repository import GitRepository
from thrust.git.tags import AutotagLister
from thrust.output.console import MockConsole, OutputRecord, Style
from thrust.platform.process import MockCommandRunner
from thrust.release.deploy import DeployFlow, DeployRequest
from thrust.release.errors import ReleaseError, UploadRejected
from thrust.release.history import TagResolver
from thrust.release.notes import NotesGenerator
from thrust.release.prompt import ScriptedPrompt
from thrust.release.transport import MockTransport
from thrust.release.upload import UploadPipeline

_REQUEST = DeployRequest(
    environment="staging",
    artifact=Path("build/App.ipa"),
    distribution_list="developers",
)


def _flow(
    runner: MockCommandRunner,
    transport: MockTransport,
    environ: dict[str, str] | None = None,
) -> tuple[DeployFlow, MockConsole]:
    console = MockConsole()
    resolver = TagResolver(
        runner=runner,
        tags=AutotagLister(runner),
        console=console,
        environ=environ or {},
    )
    pipeline = UploadPipeline(
        runner=runner,
        transport=transport,
        notes=NotesGenerator(git=GitRepository(runner), resolver=resolver),
        prompt=ScriptedPrompt("notes"),
        console=console,
        api_token="a",
        team_token="t",
        environ={},
    )
    return DeployFlow(resolver=resolver, pipeline=pipeline, console=console), console


def test_clean_upload_then_tag() -> None:
    runner = MockCommandRunner()
    flow, console = _flow(runner, MockTransport())

    result = flow.deploy(_REQUEST)

    assert isinstance(result, Ok)
    assert runner.commands[0] == ("git", "diff-index", "--quiet", "HEAD")
    assert runner.commands[-1] == ("autotag", "create", "staging")
    assert "Finished uploading to TestFlight" in console.text
    assert console.outputs[0] == OutputRecord("Deploying App.ipa to staging", Style.HEADER)


def test_dirty_tree_stops_before_upload() -> None:
    runner = MockCommandRunner()
    runner.set_failure(["git", "diff-index", "--quiet", "HEAD"])
    transport = MockTransport()
    flow, _ = _flow(runner, transport)

    result = flow.deploy(_REQUEST)

    assert isinstance(result, Err)
    assert isinstance(result.error, ReleaseError)
    assert result.error.kind == "dirty_tree"
    assert transport.posted == []


def test_ignore_git_allows_dirty_tree() -> None:
    runner = MockCommandRunner()
    runner.set_failure(["git", "diff-index", "--quiet", "HEAD"])
    flow, console = _flow(runner, MockTransport(), {"IGNORE_GIT": "1"})

    assert isinstance(flow.deploy(_REQUEST), Ok)
    assert console.has_warning()


def test_rejected_upload_is_not_tagged() -> None:
    runner = MockCommandRunner()
    flow, _ = _flow(runner, MockTransport("Invalid ipa.thrust_testflight_status_code:401"))

    result = flow.deploy(_REQUEST)

    assert result == Err(UploadRejected(status_code=401, message="Invalid ipa."))
    assert not runner.ran(["autotag", "create", "staging"])


def test_tag_failure_is_reported() -> None:
    runner = MockCommandRunner()
    runner.set_failure(["autotag", "create", "staging"], stderr="tag exists")
    flow, _ = _flow(runner, MockTransport())

    result = flow.deploy(_REQUEST)

    assert isinstance(result, Err)
    assert isinstance(result.error, ReleaseError)
    assert result.error.hint == "tag exists"
