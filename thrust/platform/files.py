"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["write_temp_text"]


def write_temp_text(content: str, *, prefix: str = "thrust_", encoding: str = "utf-8") -> Path:
    """Write text to a new temporary file and return its path.

    The file is not removed afterwards; whoever receives the path owns it.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=prefix, suffix=".txt")
    with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return Path(tmp_name)
