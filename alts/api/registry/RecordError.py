"""Malformed registry record."""

from .AltsError import AltsError


class RecordError(AltsError, ValueError):
    """A record could not be deserialized into a RegistryEntry."""
