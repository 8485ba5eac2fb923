"""Read the target of a symbolic link."""

import os
from pathlib import Path


def read_link(link: Path) -> str:
    """Return the raw target stored in ``link`` (not resolved)."""
    return os.readlink(link)
