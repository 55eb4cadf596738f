"""Upload of a built artifact to the distribution service.

One call walks Init -> NotesReady -> (Compressed) -> Submitted -> Success or
Failed. Any step failing returns its error at once; nothing is retried and no
network call happens before the notes and symbol archive are ready.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from thrust.core.config import DEFAULT_UPLOAD_URL
from thrust.core.result import Err, Ok, Result
from thrust.output.console import ConsoleProtocol
from thrust.platform.process import CommandRunner
from thrust.release.errors import ReleaseError, UploadRejected, command_failed
from thrust.release.notes import NotesGenerator
from thrust.release.prompt import UserPrompt
from thrust.release.response import UploadSucceeded, classify_upload_response
from thrust.release.settings import UploadSettings, resolve_upload_settings
from thrust.release.transport import FormField, UploadTransport

__all__ = [
    "DEPLOY_NOTES_LABEL",
    "UPLOAD_FINISHED_MESSAGE",
    "UploadOutcome",
    "UploadPipeline",
    "build_upload_fields",
    "symbol_archive_path",
    "zip_command",
]

UPLOAD_FINISHED_MESSAGE = "Finished uploading to TestFlight"
DEPLOY_NOTES_LABEL = "Deploy Notes: "

type UploadOutcome = Result[UploadSucceeded, ReleaseError | UploadRejected]


def symbol_archive_path(bundle: Path) -> Path:
    """``build/App.app.dSYM`` -> ``build/App.app.dSYM.zip``."""
    return bundle.with_name(bundle.name + ".zip")


def zip_command(archive: Path, bundle: Path) -> list[str]:
    # -r recurse, -T test the archive, -y store symlinks as links
    return ["zip", "-r", "-T", "-y", str(archive), str(bundle)]


def build_upload_fields(
    *,
    artifact: Path,
    symbol_archive: Path | None,
    notes: Path,
    settings: UploadSettings,
) -> tuple[FormField, ...]:
    fields = [FormField.attachment("file", artifact)]
    if symbol_archive is not None:
        fields.append(FormField.attachment("dsym", symbol_archive))
    fields += [
        FormField("api_token", settings.api_token),
        FormField("team_token", settings.team_token),
        FormField.attachment("notes", notes),
        FormField("notify", str(settings.notify)),
        FormField("distribution_lists", settings.distribution_list),
    ]
    return tuple(fields)


class UploadPipeline:
    """Ships an artifact with deploy notes and reports the outcome.

    Args:
        runner: Executes zip
        transport: Posts the multipart form
        notes: Generates notes from commit history
        prompt: Asks the operator for notes when not generating them
        console: Receives the result line
        api_token: Configured API token (environment may override per call)
        team_token: Configured team token (environment may override per call)
        url: Upload endpoint
        environ: Environment for overrides (defaults to os.environ)
    """

    def __init__(
        self,
        *,
        runner: CommandRunner,
        transport: UploadTransport,
        notes: NotesGenerator,
        prompt: UserPrompt,
        console: ConsoleProtocol,
        api_token: str,
        team_token: str,
        url: str = DEFAULT_UPLOAD_URL,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._runner = runner
        self._transport = transport
        self._notes = notes
        self._prompt = prompt
        self._console = console
        self._api_token = api_token
        self._team_token = team_token
        self._url = url
        self._environ = os.environ if environ is None else environ

    def upload(
        self,
        artifact_path: Path,
        notify: bool | None,
        distribution_list: str,
        autogenerate_notes: bool,
        environment: str,
        symbol_bundle_path: Path | None = None,
    ) -> UploadOutcome:
        settings = resolve_upload_settings(
            api_token=self._api_token,
            team_token=self._team_token,
            notify=notify,
            distribution_list=distribution_list,
            environ=self._environ,
        )

        if autogenerate_notes:
            notes = self._notes.generate_notes(environment)
        else:
            notes = self._prompt.get_user_input(DEPLOY_NOTES_LABEL)
        if isinstance(notes, Err):
            return notes

        archive: Path | None = None
        if symbol_bundle_path is not None:
            archive = symbol_archive_path(symbol_bundle_path)
            zipped = self._runner.run(zip_command(archive, symbol_bundle_path)).map_err(command_failed)
            if isinstance(zipped, Err):
                return zipped

        fields = build_upload_fields(
            artifact=artifact_path,
            symbol_archive=archive,
            notes=notes.value,
            settings=settings,
        )
        self._console.info(f"Uploading {artifact_path} to {settings.distribution_list or 'testers'}")
        body = self._transport.post(self._url, fields).map_err(command_failed)
        if isinstance(body, Err):
            return body

        outcome = classify_upload_response(body.value)
        if isinstance(outcome, Err):
            self._console.error(outcome.error.banner())
            return outcome

        self._console.success(UPLOAD_FINISHED_MESSAGE)
        return Ok(outcome.value)
