"""Link path occupied by something that cannot be replaced."""

import errno

from .AltsError import AltsError


class LinkConflictError(AltsError, OSError):
    """The link path exists but is neither a file, a symlink nor a directory."""

    def __init__(self, link_path: str):
        super().__init__(errno.EEXIST, "Link path exists and is not a file, symlink or directory", link_path)
