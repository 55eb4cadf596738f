"""Multipart upload transport.

``CurlTransport`` posts the form with curl so the status marker the response
parser expects is appended to the body by ``-w``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from thrust.core.result import Err, Ok, Result
from thrust.platform.process import CommandRunner, ProcessError
from thrust.release.response import STATUS_MARKER

__all__ = ["CurlTransport", "FormField", "MockTransport", "UploadTransport", "curl_command"]


@dataclass(frozen=True, slots=True)
class FormField:
    """One multipart field; ``file`` fields carry a path, others plain text."""

    name: str
    value: str
    file: bool = False

    @classmethod
    def attachment(cls, name: str, path: Path | str) -> FormField:
        return cls(name=name, value=str(path), file=True)


class UploadTransport(Protocol):
    def post(self, url: str, fields: tuple[FormField, ...]) -> Result[str, ProcessError]:
        """Submit the form and return the full response body."""
        ...


def curl_command(url: str, fields: tuple[FormField, ...]) -> list[str]:
    cmd = ["curl", "-sw", f"{STATUS_MARKER}%{{http_code}}", url]
    for f in fields:
        if f.file:
            cmd += ["-F", f"{f.name}=@{f.value}"]
        else:
            # --form-string keeps a leading @ or < in a value literal
            cmd += ["--form-string", f"{f.name}={f.value}"]
    return cmd


class CurlTransport:
    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def post(self, url: str, fields: tuple[FormField, ...]) -> Result[str, ProcessError]:
        return self._runner.capture(curl_command(url, fields))


@dataclass(frozen=True, slots=True)
class PostedForm:
    url: str
    fields: tuple[FormField, ...]

    def value(self, name: str) -> str | None:
        for f in self.fields:
            if f.name == name:
                return f.value
        return None

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]


class MockTransport:
    """UploadTransport replaying a fixed response body, for tests."""

    def __init__(self, body: str | ProcessError = f"Upload Succeeded! {STATUS_MARKER}200") -> None:
        self.body = body
        self.posted: list[PostedForm] = []

    def post(self, url: str, fields: tuple[FormField, ...]) -> Result[str, ProcessError]:
        self.posted.append(PostedForm(url=url, fields=fields))
        if isinstance(self.body, ProcessError):
            return Err(self.body)
        return Ok(self.body)
