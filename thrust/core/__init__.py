"""Core types shared by every thrust layer."""

from .config import ConfigError, EnvironmentConfig, ServiceConfig, ThrustConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "EnvironmentConfig",
    "ServiceConfig",
    "ThrustConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
