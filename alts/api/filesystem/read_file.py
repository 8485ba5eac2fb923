"""Read a text file."""

from pathlib import Path


def read_file(path: Path) -> str:
    """Read ``path`` as UTF-8 text.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the bytes are not valid UTF-8
    """
    with path.open(encoding="utf-8") as fh:
        return fh.read()
