"""Subprocess execution with Result-based error handling.

``run`` captures stdout, ``run_silent`` lets output stream to the terminal.
``CommandRunner`` is the narrow seam the release code talks through, so tests
can swap in ``MockCommandRunner`` instead of shelling out to git or autotag.

Usage:
    runner = SubprocessRunner(cwd=Path("."))
    match runner.capture(["git", "rev-parse", "HEAD"]):
        case Ok(stdout):
            print(stdout.strip())
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from thrust.core.result import Err, Ok, Result

__all__ = [
    "CommandRunner",
    "MockCommandRunner",
    "ProcessError",
    "SubprocessRunner",
    "run",
    "run_silent",
]

_DEFAULT_TIMEOUT_SECONDS = 10 * 60.0


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never ran).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[None, ProcessError]:
    """Execute a command without capturing output.

    Use this for commands whose output should stream to the terminal
    (zip, git checkout). Only the exit status is checked.
    """
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), env=env, timeout=timeout, check=False)
    except subprocess.TimeoutExpired:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout="",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr=""))

    return Ok(None)


@runtime_checkable
class CommandRunner(Protocol):
    """Executes external commands on behalf of the release code."""

    def run(self, cmd: list[str]) -> Result[None, ProcessError]:
        """Run to completion, failing on a non-zero exit status."""
        ...

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]:
        """Run and return standard output, failing on a non-zero exit status."""
        ...


class SubprocessRunner:
    """CommandRunner backed by real subprocesses in a fixed directory."""

    def __init__(self, cwd: Path, timeout: float = _DEFAULT_TIMEOUT_SECONDS) -> None:
        self.cwd = cwd
        self.timeout = timeout

    def run(self, cmd: list[str]) -> Result[None, ProcessError]:
        return run_silent(cmd, cwd=self.cwd, timeout=self.timeout)

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]:
        return run(cmd, cwd=self.cwd, timeout=self.timeout)


class MockCommandRunner:
    """CommandRunner that replays canned results for testing.

    Captured commands must be registered; unregistered ones fail with exit 127
    so a test never silently reads empty output. Commands passed to ``run``
    succeed unless a failure was registered for them.

    Usage:
        runner = MockCommandRunner()
        runner.set_output(["git", "rev-parse", "HEAD"], "abc123\\n")
        runner.set_failure(["git", "diff-index", "--quiet", "HEAD"])
    """

    def __init__(self) -> None:
        self._outputs: dict[tuple[str, ...], str | ProcessError] = {}
        self._failures: dict[tuple[str, ...], ProcessError] = {}
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def set_output(self, cmd: list[str], output: str | ProcessError) -> None:
        self._outputs[tuple(cmd)] = output

    def set_failure(self, cmd: list[str], *, returncode: int = 1, stderr: str = "") -> None:
        key = tuple(cmd)
        error = ProcessError(command=key, returncode=returncode, stdout="", stderr=stderr)
        self._failures[key] = error
        self._outputs[key] = error

    def run(self, cmd: list[str]) -> Result[None, ProcessError]:
        key = tuple(cmd)
        self.calls.append(("run", key))
        if key in self._failures:
            return Err(self._failures[key])
        return Ok(None)

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]:
        key = tuple(cmd)
        self.calls.append(("capture", key))

        if key not in self._outputs:
            return Err(ProcessError(command=key, returncode=127, stdout="", stderr="not mocked"))

        output = self._outputs[key]
        if isinstance(output, ProcessError):
            return Err(output)
        return Ok(output)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        """Every command seen, in call order."""
        return [cmd for _, cmd in self.calls]

    def ran(self, cmd: list[str]) -> bool:
        return tuple(cmd) in self.commands
