"""Filesystem access layer.

Thin wrappers over os/pathlib used by the registry. Every function either
succeeds or raises ``OSError``.
"""

from .ensure_dir import ensure_dir
from .make_symlink import make_symlink
from .read_file import read_file
from .read_link import read_link
from .remove_dir import remove_dir
from .remove_file import remove_file
from .rename import rename
from .write_file import write_file

__all__ = [
    "ensure_dir",
    "make_symlink",
    "read_file",
    "read_link",
    "remove_dir",
    "remove_file",
    "rename",
    "write_file",
]
