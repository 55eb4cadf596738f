from __future__ import annotations

from pathlib import Path

from thrust.core.result import Err, Ok, Result
from thrust.git.repository import GitRepository
from thrust.platform.files import write_temp_text
from thrust.release.errors import ReleaseError, command_failed
from thrust.release.history import Deployed, NeverDeployed, TagResolver

__all__ = ["NotesGenerator", "write_notes_file"]


def write_notes_file(content: str) -> Result[Path, ReleaseError]:
    """Put deploy notes into a fresh temp file owned by the caller."""
    try:
        return Ok(write_temp_text(content, prefix="thrust_notes_"))
    except OSError as e:
        return Err(ReleaseError(kind="io_failed", message=f"failed to write deploy notes: {e}"))


class NotesGenerator:
    """Builds deploy notes from commit history."""

    def __init__(self, *, git: GitRepository, resolver: TagResolver) -> None:
        self._git = git
        self._resolver = resolver

    def generate_notes(self, environment: str) -> Result[Path, ReleaseError]:
        """Write the commits since the last deploy to ``environment`` to a file.

        When the environment was never deployed, the notes are the summary of
        the latest commit only.
        """
        head = self._git.head_commit().map_err(command_failed)
        if isinstance(head, Err):
            return head

        state = self._resolver.latest_tagged_commit(environment)
        if isinstance(state, Err):
            return state

        match state.value:
            case Deployed(commit=previous):
                content = self._git.commit_log(previous, head.value)
            case NeverDeployed():
                content = self._git.commit_summary(head.value)

        written = content.map_err(command_failed)
        if isinstance(written, Err):
            return written
        return write_notes_file(written.value)

    def notes_for_summary(self, environment: str) -> Result[str, ReleaseError]:
        """One line describing what is currently deployed to ``environment``."""
        state = self._resolver.latest_tagged_commit(environment)
        if isinstance(state, Err):
            return state

        match state.value:
            case Deployed(commit=previous):
                return self._git.commit_summary(previous).map(str.strip).map_err(command_failed)
            case NeverDeployed():
                return Ok(f"Never deployed to `{environment}`")
