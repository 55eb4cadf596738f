"""Per-upload settings resolved from arguments and the environment.

Precedence for each value, highest first:

* ``TESTFLIGHT_API_TOKEN`` / ``TESTFLIGHT_TEAM_TOKEN`` when non-empty, then
  the explicit token.
* ``NOTIFY=FALSE`` (exact, case-sensitive) forces notifications off. Any
  other value is ignored: the explicit flag applies, then ``True``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "API_TOKEN_ENV",
    "NOTIFY_ENV",
    "NOTIFY_OFF",
    "TEAM_TOKEN_ENV",
    "UploadSettings",
    "resolve_upload_settings",
]

API_TOKEN_ENV = "TESTFLIGHT_API_TOKEN"
TEAM_TOKEN_ENV = "TESTFLIGHT_TEAM_TOKEN"
NOTIFY_ENV = "NOTIFY"
NOTIFY_OFF = "FALSE"


@dataclass(frozen=True, slots=True)
class UploadSettings:
    api_token: str
    team_token: str
    notify: bool
    distribution_list: str


def _env_override(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _resolve_notify(explicit: bool | None, environ: Mapping[str, str]) -> bool:
    if environ.get(NOTIFY_ENV) == NOTIFY_OFF:
        return False
    return True if explicit is None else explicit


def resolve_upload_settings(
    *,
    api_token: str,
    team_token: str,
    notify: bool | None,
    distribution_list: str,
    environ: Mapping[str, str] | None = None,
) -> UploadSettings:
    env = os.environ if environ is None else environ
    return UploadSettings(
        api_token=_env_override(env, API_TOKEN_ENV) or api_token,
        team_token=_env_override(env, TEAM_TOKEN_ENV) or team_token,
        notify=_resolve_notify(notify, env),
        distribution_list=distribution_list,
    )
