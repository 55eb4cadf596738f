"""Git commands used by release bookkeeping.

Thin wrappers over a ``CommandRunner``; every method returns the runner's
Result unchanged apart from trimming where noted.
"""

from __future__ import annotations

from thrust.core.result import Result
from thrust.platform.process import CommandRunner, ProcessError

__all__ = ["GitRepository"]


class GitRepository:
    """Git operations against the repository the runner executes in."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def head_commit(self) -> Result[str, ProcessError]:
        """Identifier of HEAD, trailing newline removed."""
        return self._runner.capture(["git", "rev-parse", "HEAD"]).map(str.strip)

    def commit_summary(self, ref: str) -> Result[str, ProcessError]:
        """One-line summary of ``ref`` (``git log --oneline -n 1``)."""
        return self._runner.capture(["git", "log", "--oneline", "-n", "1", ref])

    def commit_log(self, since: str, until: str) -> Result[str, ProcessError]:
        """One line per commit reachable from ``until`` but not from ``since``."""
        return self._runner.capture(["git", "log", "--oneline", f"{since}..{until}"])

    def ensure_no_changes(self) -> Result[None, ProcessError]:
        """Fails when tracked files differ from HEAD."""
        return self._runner.run(["git", "diff-index", "--quiet", "HEAD"])

    def checkout(self, ref: str) -> Result[None, ProcessError]:
        return self._runner.run(["git", "checkout", ref])
