"""Deployment history derived from autotag markers.

Nothing here is cached: each call lists tags again, so the answer always
reflects the repository as it is right now.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from thrust.core.result import Err, Ok, Result
from thrust.git.repository import GitRepository
from thrust.git.tags import TagLister, autotag_create_command
from thrust.output.console import ConsoleProtocol
from thrust.platform.process import CommandRunner
from thrust.release.errors import ReleaseError, command_failed

__all__ = [
    "IGNORE_GIT_ENV",
    "SKIP_CLEAN_CHECK_WARNING",
    "Deployed",
    "DeploymentState",
    "NeverDeployed",
    "TagResolver",
]

IGNORE_GIT_ENV = "IGNORE_GIT"
SKIP_CLEAN_CHECK_WARNING = "WARNING NOT CHECKING FOR CLEAN WORKING DIRECTORY"


@dataclass(frozen=True, slots=True)
class Deployed:
    commit: str


@dataclass(frozen=True, slots=True)
class NeverDeployed:
    environment: str


type DeploymentState = Deployed | NeverDeployed


class TagResolver:
    """Answers "what was last deployed where" and guards the working tree.

    Args:
        runner: Executes git and autotag
        tags: Source of tag listings
        console: Receives operator warnings
        environ: Environment used for the clean-tree bypass (defaults to os.environ)
    """

    def __init__(
        self,
        *,
        runner: CommandRunner,
        tags: TagLister,
        console: ConsoleProtocol,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._runner = runner
        self._tags = tags
        self._console = console
        self._environ = os.environ if environ is None else environ
        self._git = GitRepository(runner)

    def latest_tagged_commit(self, environment: str) -> Result[DeploymentState, ReleaseError]:
        listed = self._tags.list_tags(environment).map_err(command_failed)
        if isinstance(listed, Err):
            return listed

        entries = listed.value
        if not entries:
            return Ok(NeverDeployed(environment))
        # autotag lists oldest first
        return Ok(Deployed(entries[-1].commit))

    def ensure_clean_tree(self) -> Result[None, ReleaseError]:
        if self._environ.get(IGNORE_GIT_ENV):
            self._console.warning(SKIP_CLEAN_CHECK_WARNING)
            return Ok(None)

        checked = self._git.ensure_no_changes()
        if isinstance(checked, Err):
            return Err(
                ReleaseError(
                    kind="dirty_tree",
                    message="working directory has uncommitted changes",
                    hint=f"commit or stash them, or set {IGNORE_GIT_ENV}=1",
                )
            )
        return Ok(None)

    def checkout_tag(self, label: str) -> Result[str, ReleaseError]:
        """Check out the most recent tag for ``label`` and return its name."""
        listed = self._tags.list_tags(label).map_err(command_failed)
        if isinstance(listed, Err):
            return listed
        if not listed.value:
            return Err(ReleaseError(kind="invalid_input", message=f"no tags found for `{label}`"))

        tag = listed.value[-1].name
        return self._git.checkout(tag).map(lambda _: tag).map_err(command_failed)

    def tag_deployment(self, environment: str) -> Result[None, ReleaseError]:
        """Mark HEAD as deployed to ``environment``."""
        return self._runner.run(autotag_create_command(environment)).map_err(command_failed)
