"""Registry API module."""

from .._output_schemas.registry import (
    RegistryAddOutput,
    RegistryListOutput,
    RegistryRemoveOutput,
    RegistrySyncOutput,
)
from .AltsError import AltsError
from .Candidate import Candidate
from .InvalidNameError import InvalidNameError
from .LinkConflictError import LinkConflictError
from .LinkOutcome import LinkOutcome
from .RecordError import RecordError
from .RegistryEntry import RegistryEntry
from .RegistryStore import RegistryStore
from .recover_backup import recover_backup
from .validate_name import validate_name

__all__ = [
    "AltsError",
    "Candidate",
    "InvalidNameError",
    "LinkConflictError",
    "LinkOutcome",
    "RecordError",
    "RegistryAddOutput",
    "RegistryEntry",
    "RegistryListOutput",
    "RegistryRemoveOutput",
    "RegistryStore",
    "RegistrySyncOutput",
    "recover_backup",
    "validate_name",
]
