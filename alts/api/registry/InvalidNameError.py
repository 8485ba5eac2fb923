"""Link name that cannot be used as a record or link filename."""

from .AltsError import AltsError


class InvalidNameError(AltsError, ValueError):
    """The name is empty, a relative path component or contains a separator."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid name {name!r}: {reason}")
        self.name = name
        self.reason = reason
