"""Write a text file durably."""

import os
from pathlib import Path


def write_file(path: Path, contents: str) -> int:
    """Create (or truncate) ``path`` and write ``contents`` as UTF-8.

    The data is flushed and fsynced before returning.

    Returns:
        Number of bytes written
    """
    data = contents.encode("utf-8")
    with path.open("wb") as fh:
        fh.write(data)
        fh.flush()
        os.fsync(fh.fileno())
    return len(data)
