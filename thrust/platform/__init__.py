"""Process and filesystem access."""

from .files import write_temp_text
from .process import (
    CommandRunner,
    MockCommandRunner,
    ProcessError,
    SubprocessRunner,
    run,
    run_silent,
)

__all__ = [
    "CommandRunner",
    "MockCommandRunner",
    "ProcessError",
    "SubprocessRunner",
    "run",
    "run_silent",
    "write_temp_text",
]
