"""Create a directory tree if it does not exist."""

import errno
from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Create ``path`` and its parents.

    Raises:
        NotADirectoryError: If ``path`` exists but is not a directory
        OSError: If the directory cannot be created
    """
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, "Path exists but is not a directory", str(path))
    path.mkdir(parents=True, exist_ok=True)
