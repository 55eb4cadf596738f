"""Typed loading of ``thrust.toml``.

Example:

    [testflight]
    api_token = "..."
    team_token = "..."

    [environments.staging]
    distribution_list = "developers"
    notify = true
    autogenerate_notes = true
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_UPLOAD_URL",
    "ConfigError",
    "EnvironmentConfig",
    "ServiceConfig",
    "ThrustConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "thrust.toml"
DEFAULT_UPLOAD_URL = "http://testflightapp.com/api/builds.json"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Credentials and endpoint of the distribution service."""

    api_token: str = ""
    team_token: str = ""
    url: str = DEFAULT_UPLOAD_URL


@dataclass(frozen=True, slots=True)
class EnvironmentConfig:
    """Per deployment environment defaults.

    Attributes:
        name: Environment label, also used as the autotag filter
        distribution_list: Tester group the build is released to
        notify: Whether testers are notified of the new build
        autogenerate_notes: Build notes from commit history instead of prompting
    """

    name: str
    distribution_list: str = ""
    notify: bool = True
    autogenerate_notes: bool = False


def _empty_environments() -> dict[str, EnvironmentConfig]:
    return {}


@dataclass(frozen=True, slots=True)
class ThrustConfig:
    """Main configuration container."""

    testflight: ServiceConfig = field(default_factory=ServiceConfig)
    environments: dict[str, EnvironmentConfig] = field(default_factory=_empty_environments)

    def environment(self, name: str) -> EnvironmentConfig:
        """Config for ``name``, or defaults when the file does not mention it."""
        return self.environments.get(name) or EnvironmentConfig(name=name)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ThrustConfig:
        """Create ThrustConfig from a parsed TOML mapping."""
        testflight: StrDict = get_table(data, "testflight") or {}
        environments: StrDict = get_table(data, "environments") or {}

        envs: dict[str, EnvironmentConfig] = {}
        for name in environments:
            table = get_table(environments, name)
            if table is None:
                raise ValueError(f"environments.{name} must be a table")
            notify = get_bool(table, "notify")
            autogenerate = get_bool(table, "autogenerate_notes")
            envs[name] = EnvironmentConfig(
                name=name,
                distribution_list=get_str(table, "distribution_list") or "",
                notify=True if notify is None else notify,
                autogenerate_notes=bool(autogenerate),
            )

        return cls(
            testflight=ServiceConfig(
                api_token=get_str(testflight, "api_token") or "",
                team_token=get_str(testflight, "team_token") or "",
                url=get_str(testflight, "url") or DEFAULT_UPLOAD_URL,
            ),
            environments=envs,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ThrustConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to thrust.toml

    Returns:
        Ok(ThrustConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ThrustConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[ThrustConfig, ConfigError]:
    """Like load_config, but a missing file yields the default config.

    A file that exists and is broken is still an error.
    """
    if not path.exists():
        return Ok(ThrustConfig())
    return load_config(path)
