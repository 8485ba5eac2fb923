"""Registry store: every registry entry, keyed by name."""

import errno
import logging
from collections.abc import Collection
from pathlib import Path

from ...constants import BACKUP_SUFFIX, RECORD_SUFFIX
from ..filesystem import ensure_dir, read_file, remove_file, rename, write_file
from .backup_path import backup_path
from .Candidate import Candidate
from .InvalidNameError import InvalidNameError
from .LinkOutcome import LinkOutcome
from .recover_backup import recover_backup
from .RecordError import RecordError
from .RegistryEntry import RegistryEntry
from .validate_name import validate_name

logger = logging.getLogger(__name__)


class RegistryStore:
    """In-memory registry loaded from a directory of ``<name>.json`` records.

    The store owns its entries. Mutations stay in memory until ``commit``
    writes the records and ``sync_links`` updates the symlinks.
    """

    def __init__(self, link_dir: str | Path, entries: dict[str, RegistryEntry] | None = None):
        self.link_dir = Path(link_dir)
        self._entries: dict[str, RegistryEntry] = dict(entries) if entries else {}
        # Names the last commit left unsaved on disk
        self.skipped: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def record_path(directory: Path, name: str) -> Path:
        """Path of the record file for ``name`` in ``directory``."""
        return directory / f"{name}{RECORD_SUFFIX}"

    @classmethod
    def load(cls, directory: str | Path, link_dir: str | Path) -> "RegistryStore":
        """Load every record in ``directory``.

        A missing directory yields an empty store. Records that cannot be read
        or parsed are logged and skipped. Backups left by an interrupted commit
        are recovered first.

        Raises:
            NotADirectoryError: If ``directory`` exists but is not a directory
            OSError: If the directory cannot be listed
        """
        directory = Path(directory)
        if not directory.exists():
            logger.info("Registry directory %s does not exist; starting empty", directory)
            return cls(link_dir)
        if not directory.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, "Registry path is not a directory", str(directory))

        for backup in sorted(directory.glob(f"*{RECORD_SUFFIX}{BACKUP_SUFFIX}")):
            record = backup.with_name(backup.name[: -len(BACKUP_SUFFIX)])
            try:
                recover_backup(record)
            except OSError as e:
                logger.error("Could not recover backup %s: %s", backup, e)

        entries: dict[str, RegistryEntry] = {}
        for path in sorted(directory.iterdir()):
            if path.suffix != RECORD_SUFFIX or not path.is_file():
                logger.debug("Skipping %s", path)
                continue

            name = path.stem
            try:
                name.encode("utf-8")
            except UnicodeEncodeError:
                logger.warning("Skipping %s: filename is not valid UTF-8", path)
                continue
            try:
                validate_name(name)
            except InvalidNameError as e:
                logger.warning("Skipping %s: %s", path, e)
                continue

            try:
                text = read_file(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read %s: %s", path, e)
                continue

            try:
                entry = RegistryEntry.from_json(text)
            except RecordError as e:
                logger.warning("Could not deserialize %s: %s", path, e)
                continue

            logger.info("Loaded %s with %d candidate(s)", name, len(entry.candidates))
            entries[name] = entry

        return cls(link_dir, entries)

    def names(self) -> list[str]:
        """Registered names in sorted order."""
        return sorted(self._entries)

    def has(self, name: str) -> bool:
        return name in self._entries

    def get(self, name: str) -> RegistryEntry | None:
        return self._entries.get(name)

    def add_candidate(self, name: str, candidate: Candidate) -> bool:
        """Add a candidate for ``name``, creating the entry if needed.

        New entries link at ``<link_dir>/<name>``.

        Raises:
            InvalidNameError: If ``name`` is not a single plain path component
        """
        entry = self._entries.get(name)
        if entry is None:
            validate_name(name)
            entry = RegistryEntry(link_path=str(self.link_dir / name))
            self._entries[name] = entry
        return entry.add(candidate)

    def remove_candidate(self, name: str, target: str) -> bool:
        entry = self._entries.get(name)
        if entry is None:
            return False
        return entry.remove(target)

    def commit(self, directory: str | Path) -> int:
        """Write every entry to ``<directory>/<name>.json``.

        Each record is first renamed to ``<name>.json.old``, then written
        fresh, then the backup is deleted. Names are committed independently:
        a failed backup rename or a failed write that could be rolled back
        only skips that name; skipped names are listed in ``skipped``.
        Entries without candidates are purged from disk and from the store.
        An empty entry whose record cannot be removed stays in the store and
        is skipped.

        Returns:
            Total bytes written

        Raises:
            NotADirectoryError: If ``directory`` exists but is not a directory
            OSError: The original write error, if restoring the backup failed
        """
        directory = Path(directory)
        ensure_dir(directory)

        self.skipped = []
        written = 0
        purged: list[str] = []
        for name in sorted(self._entries):
            entry = self._entries[name]
            record = self.record_path(directory, name)
            if not entry.candidates:
                if self._purge_record(name, record):
                    purged.append(name)
                else:
                    self.skipped.append(name)
                continue
            committed = self._commit_entry(name, entry, record)
            if committed is None:
                self.skipped.append(name)
            else:
                written += committed

        for name in purged:
            del self._entries[name]
        return written

    def _purge_record(self, name: str, record: Path) -> bool:
        if not record.exists():
            return True
        try:
            remove_file(record)
        except OSError as e:
            logger.error("Could not remove empty record %s: %s", record, e)
            return False
        logger.info("Removed record for %s; no candidates left", name)
        return True

    def _commit_entry(self, name: str, entry: RegistryEntry, record: Path) -> int | None:
        backup = backup_path(record)
        had_backup = record.exists()
        if had_backup:
            try:
                rename(record, backup)
            except OSError as e:
                logger.error("Could not rename %s to %s: %s", record, backup, e)
                return None

        try:
            written = write_file(record, entry.to_json())
        except OSError as write_error:
            logger.error("Could not write %s: %s", record, write_error)
            self._rollback(record, backup, had_backup, write_error)
            return None

        if had_backup:
            try:
                remove_file(backup)
            except OSError as e:
                logger.warning("Could not remove backup %s: %s", backup, e)

        logger.info("Committed %s (%d bytes)", name, written)
        return written

    def _rollback(self, record: Path, backup: Path, had_backup: bool, write_error: OSError) -> None:
        if not had_backup:
            # Nothing durable to lose; drop the partial record
            if record.exists():
                try:
                    remove_file(record)
                except OSError as e:
                    logger.warning("Could not remove partial record %s: %s", record, e)
            return

        try:
            rename(backup, record)
        except OSError as recovery_error:
            logger.critical("Could not restore %s from %s: %s", record, backup, recovery_error)
            raise write_error from recovery_error
        logger.info("Restored %s from backup", record)

    def sync_links(self, exclude: Collection[str] = ()) -> dict[str, LinkOutcome]:
        """Resolve the link of every entry not in ``exclude``.

        The first failure aborts the batch.
        """
        outcomes: dict[str, LinkOutcome] = {}
        for name in sorted(self._entries):
            if name in exclude:
                logger.warning("Not syncing link for %s; its record was not saved", name)
                continue
            outcomes[name] = self._entries[name].resolve_link()
            logger.debug("Link for %s: %s", name, outcomes[name].value)
        return outcomes
