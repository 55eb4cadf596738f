"""Tag listing through the ``autotag`` convention.

``autotag list <filter>`` prints one ``<commit> <ref>`` pair per line, oldest
first. ``AutotagLister`` owns the text parsing so callers only see an ordered
tuple of ``TagEntry``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from thrust.core.result import Err, Ok, Result
from thrust.platform.process import CommandRunner, ProcessError

__all__ = [
    "AutotagLister",
    "TagEntry",
    "TagLister",
    "autotag_create_command",
    "autotag_list_command",
    "parse_tag_listing",
]


@dataclass(frozen=True, slots=True)
class TagEntry:
    """One line of a tag listing.

    Attributes:
        commit: Leading token of the line; for deployment tags, the tagged commit
        ref: Remainder of the line (may be empty)
    """

    commit: str
    ref: str = ""

    @property
    def name(self) -> str:
        """Leading token read as a tag name, as when checking out a label."""
        return self.commit


class TagLister(Protocol):
    def list_tags(self, tag_filter: str) -> Result[tuple[TagEntry, ...], ProcessError]:
        """Return entries matching ``tag_filter``, oldest first."""
        ...


def autotag_list_command(tag_filter: str) -> list[str]:
    return ["autotag", "list", tag_filter]


def autotag_create_command(label: str) -> list[str]:
    return ["autotag", "create", label]


def parse_tag_listing(output: str) -> tuple[TagEntry, ...]:
    """Parse ``autotag list`` output; blank lines are skipped."""
    entries: list[TagEntry] = []
    for line in output.splitlines():
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        ref = parts[1].strip() if len(parts) > 1 else ""
        entries.append(TagEntry(commit=parts[0], ref=ref))
    return tuple(entries)


class AutotagLister:
    """TagLister that shells out to ``autotag``."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list_tags(self, tag_filter: str) -> Result[tuple[TagEntry, ...], ProcessError]:
        result = self._runner.capture(autotag_list_command(tag_filter))
        if isinstance(result, Err):
            return result
        return Ok(parse_tag_listing(result.value))
