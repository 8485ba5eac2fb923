"""Rename a file, replacing the destination."""

import os
from pathlib import Path


def rename(source: Path, dest: Path) -> None:
    """Atomically rename ``source`` to ``dest`` (same filesystem)."""
    os.replace(source, dest)
