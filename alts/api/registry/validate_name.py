"""Check that a link name is a single plain path component."""

import os

from .InvalidNameError import InvalidNameError


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if it can name both a record and a link.

    Raises:
        InvalidNameError: If ``name`` is empty, ``.`` or ``..``, or contains a
            path separator or a NUL byte
    """
    if not name:
        raise InvalidNameError(name, "name is empty")
    if name in (os.curdir, os.pardir):
        raise InvalidNameError(name, "name is a relative path component")
    for sep in ("/", os.sep, os.altsep):
        if sep and sep in name:
            raise InvalidNameError(name, f"name contains {sep!r}")
    if "\0" in name:
        raise InvalidNameError(name, "name contains a NUL byte")
    return name
