"""Create a symbolic link."""

import os
from pathlib import Path


def make_symlink(target: str, link: Path) -> None:
    """Create ``link`` pointing at ``target``. ``link`` must not exist."""
    os.symlink(target, link)
