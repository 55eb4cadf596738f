"""Tests for thrust.release.settings."""

from __future__ import annotations

import pytest

from thrust.release.settings import UploadSettings, resolve_upload_settings


def _resolve(environ: dict[str, str], notify: bool | None = True) -> UploadSettings:
    return resolve_upload_settings(
        api_token="api_token",
        team_token="team_token",
        notify=notify,
        distribution_list="developers",
        environ=environ,
    )


class TestTokens:
    def test_explicit_tokens_without_environment(self) -> None:
        settings = _resolve({})
        assert settings.api_token == "api_token"
        assert settings.team_token == "team_token"
        assert settings.distribution_list == "developers"

    def test_environment_overrides_api_token(self) -> None:
        settings = _resolve({"TESTFLIGHT_API_TOKEN": "i_just_wanted_to_change_my_token"})
        assert settings.api_token == "i_just_wanted_to_change_my_token"
        assert settings.team_token == "team_token"

    def test_environment_overrides_team_token(self) -> None:
        assert _resolve({"TESTFLIGHT_TEAM_TOKEN": "other_team"}).team_token == "other_team"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_environment_value_is_ignored(self, value: str) -> None:
        assert _resolve({"TESTFLIGHT_API_TOKEN": value}).api_token == "api_token"


class TestNotify:
    def test_defaults_to_true(self) -> None:
        assert _resolve({}, notify=None).notify is True

    @pytest.mark.parametrize("explicit", [True, False])
    def test_explicit_flag_without_environment(self, explicit: bool) -> None:
        assert _resolve({}, notify=explicit).notify is explicit

    def test_environment_false_wins(self) -> None:
        assert _resolve({"NOTIFY": "FALSE"}, notify=True).notify is False
        assert _resolve({"NOTIFY": "FALSE"}, notify=None).notify is False

    @pytest.mark.parametrize("value", ["false", "False", " FALSE "])
    def test_only_exact_uppercase_false_disables(self, value: str) -> None:
        assert _resolve({"NOTIFY": value}, notify=None).notify is True
        assert _resolve({"NOTIFY": value}, notify=True).notify is True

    @pytest.mark.parametrize("value", ["TRUE", "true", "yes", "1"])
    def test_other_environment_values_keep_explicit_false(self, value: str) -> None:
        assert _resolve({"NOTIFY": value}, notify=False).notify is False

    def test_empty_environment_value_falls_back(self) -> None:
        assert _resolve({"NOTIFY": ""}, notify=False).notify is False


def test_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TESTFLIGHT_API_TOKEN", "from_env")
    monkeypatch.setenv("NOTIFY", "FALSE")

    settings = resolve_upload_settings(
        api_token="api_token", team_token="t", notify=True, distribution_list="d"
    )

    assert settings.api_token == "from_env"
    assert settings.notify is False
