"""Interactive capture of deploy notes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from thrust.core.result import Result
from thrust.release.errors import ReleaseError
from thrust.release.notes import write_notes_file

__all__ = ["ScriptedPrompt", "TextPrompt", "UserPrompt"]


class UserPrompt(Protocol):
    def get_user_input(self, label: str) -> Result[Path, ReleaseError]:
        """Ask the operator for text and return the file holding the answer."""
        ...


class TextPrompt:
    """UserPrompt around any ``ask(label) -> str`` callable.

    The CLI passes ``typer.prompt``; the answer is written to a temp file the
    same way generated notes are.
    """

    def __init__(self, ask: Callable[[str], str]) -> None:
        self._ask = ask

    def get_user_input(self, label: str) -> Result[Path, ReleaseError]:
        return write_notes_file(self._ask(label))


class ScriptedPrompt:
    """UserPrompt returning a canned answer, for tests."""

    def __init__(self, answer: str = "") -> None:
        self.answer = answer
        self.labels: list[str] = []

    def get_user_input(self, label: str) -> Result[Path, ReleaseError]:
        self.labels.append(label)
        return write_notes_file(self.answer)
