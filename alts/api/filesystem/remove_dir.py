"""Remove an empty directory."""

from pathlib import Path


def remove_dir(path: Path) -> None:
    """Remove ``path`` if it is an empty directory.

    Never recurses: a non-empty directory raises ``OSError`` (ENOTEMPTY).
    """
    path.rmdir()
