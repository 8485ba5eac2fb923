"""Path of the commit backup for a record."""

from pathlib import Path

from ...constants import BACKUP_SUFFIX


def backup_path(record_path: Path) -> Path:
    """``<name>.json`` -> ``<name>.json.old``."""
    return record_path.with_name(record_path.name + BACKUP_SUFFIX)
