"""Exit codes for thrust commands.

The CLI maps every failure to one of these codes so wrapping scripts (CI jobs,
rake tasks) can tell a dirty working tree from a rejected upload.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the command-line contract and should remain stable:
    - 0: Success
    - 1: User error (bad arguments, nothing to check out)
    - 2: Environment error (dirty working tree, invalid config)
    - 3: External command failed (git, autotag, zip, curl)
    - 4: Upload rejected by the distribution service
    - 5: I/O error (notes file could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 3
    UPLOAD_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
