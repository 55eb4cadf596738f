"""Tests for thrust.core.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from thrust.core.config import (
    DEFAULT_UPLOAD_URL,
    EnvironmentConfig,
    ServiceConfig,
    ThrustConfig,
    load_config,
    load_config_or_default,
)
from thrust.core.errors import ErrorCode
from thrust.core.result import Err, Ok

_SAMPLE = """
[testflight]
api_token = "api"
team_token = "team"

[environments.staging]
distribution_list = "developers"
notify = false
autogenerate_notes = true

[environments.production]
distribution_list = "everyone"
"""


class TestThrustConfig:
    def test_defaults(self) -> None:
        config = ThrustConfig()
        assert config.testflight == ServiceConfig()
        assert config.testflight.url == DEFAULT_UPLOAD_URL
        assert config.environments == {}

    def test_unknown_environment_gets_defaults(self) -> None:
        env = ThrustConfig().environment("qa")
        assert env == EnvironmentConfig(name="qa")
        assert env.notify is True
        assert env.autogenerate_notes is False

    def test_from_dict(self) -> None:
        config = ThrustConfig.from_dict(
            {
                "testflight": {"api_token": " api ", "url": "https://example.test/upload"},
                "environments": {"staging": {"distribution_list": "devs", "notify": False}},
            }
        )
        assert config.testflight.api_token == "api"
        assert config.testflight.team_token == ""
        assert config.testflight.url == "https://example.test/upload"
        assert config.environment("staging").distribution_list == "devs"
        assert config.environment("staging").notify is False

    def test_environment_must_be_table(self) -> None:
        with pytest.raises(ValueError, match="environments.staging"):
            ThrustConfig.from_dict({"environments": {"staging": "devs"}})


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "thrust.toml"
        path.write_text(_SAMPLE, encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Ok)
        config = result.value
        assert config.testflight.api_token == "api"
        assert config.testflight.team_token == "team"
        staging = config.environment("staging")
        assert staging.distribution_list == "developers"
        assert staging.notify is False
        assert staging.autogenerate_notes is True
        assert config.environment("production").notify is True

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "thrust.toml"
        path.write_text("[testflight\n", encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "thrust.toml"
        path.write_text('environments = { staging = "x" }\n', encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_or_default_missing_file(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "thrust.toml")
        assert result == Ok(ThrustConfig())

    def test_or_default_broken_file_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "thrust.toml"
        path.write_text("not toml at all [", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.COMMAND_ERROR == 3
        assert ErrorCode.UPLOAD_ERROR == 4
        assert ErrorCode.IO_ERROR == 5

    def test_str(self) -> None:
        assert str(ErrorCode.UPLOAD_ERROR) == "upload error"
