"""Remove a file or symbolic link."""

from pathlib import Path


def remove_file(path: Path) -> None:
    """Unlink ``path``. Symbolic links are removed, not followed."""
    path.unlink()
