"""Parsing of the distribution service's upload response.

The upload is sent with ``curl -w``, which appends
``thrust_testflight_status_code:<http code>`` to whatever body the service
returned. The status decides the outcome; the body text before the marker,
trimmed, is the service's message.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from thrust.core.result import Err, Ok, Result
from thrust.release.errors import UploadRejected

__all__ = [
    "STATUS_MARKER",
    "UploadResponse",
    "UploadSucceeded",
    "classify_upload_response",
    "parse_upload_response",
]

STATUS_MARKER = "thrust_testflight_status_code:"

_STATUS_RE = re.compile(re.escape(STATUS_MARKER) + r"(\d+)")


@dataclass(frozen=True, slots=True)
class UploadResponse:
    status_code: int
    message: str


@dataclass(frozen=True, slots=True)
class UploadSucceeded:
    message: str


def parse_upload_response(body: str) -> UploadResponse | None:
    """Split a response body into status code and message.

    Returns None when the body carries no status marker. If the marker occurs
    more than once, the last occurrence is the one curl appended.
    """
    matches = list(_STATUS_RE.finditer(body))
    if not matches:
        return None
    last = matches[-1]
    return UploadResponse(status_code=int(last.group(1)), message=body[: last.start()].strip())


def classify_upload_response(body: str) -> Result[UploadSucceeded, UploadRejected]:
    parsed = parse_upload_response(body)
    if parsed is None:
        return Err(UploadRejected(status_code=0, message=body.strip() or "no status code in response"))
    if parsed.status_code == 200:
        return Ok(UploadSucceeded(message=parsed.message))
    return Err(UploadRejected(status_code=parsed.status_code, message=parsed.message))
