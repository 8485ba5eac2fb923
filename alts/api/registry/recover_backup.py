"""Recover a record left behind by an interrupted commit."""

import logging
from pathlib import Path

from ..filesystem import read_file, remove_file, rename
from .backup_path import backup_path
from .RecordError import RecordError
from .RegistryEntry import RegistryEntry

logger = logging.getLogger(__name__)


def _is_intact(record_path: Path) -> bool:
    if not record_path.is_file():
        return False
    try:
        RegistryEntry.from_json(read_file(record_path))
    except (OSError, UnicodeDecodeError, RecordError):
        return False
    return True


def recover_backup(record_path: Path) -> bool:
    """Resolve a leftover ``<name>.json.old`` next to ``record_path``.

    A missing or unparseable record is replaced by the backup, byte for byte.
    An intact record means the interrupted commit finished writing, so the
    backup is discarded.

    Returns:
        True if the record was restored from the backup

    Raises:
        OSError: If the backup cannot be renamed or removed
    """
    backup = backup_path(record_path)
    if not backup.is_file():
        return False

    if _is_intact(record_path):
        logger.info("Discarding stale backup %s; %s is intact", backup, record_path)
        remove_file(backup)
        return False

    logger.warning("Restoring %s from backup %s", record_path, backup)
    rename(backup, record_path)
    return True
