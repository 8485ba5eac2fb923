"""Base exception for alts."""


class AltsError(Exception):
    """Base class for all alts errors."""
