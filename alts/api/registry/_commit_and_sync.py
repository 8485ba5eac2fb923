"""Persist a mutated store and bring its links up to date."""

from ..config.AltsConfig import AltsConfig
from .LinkOutcome import LinkOutcome
from .RegistryStore import RegistryStore


def _commit_and_sync(store: RegistryStore, config: AltsConfig) -> tuple[int, dict[str, LinkOutcome]]:
    """Commit every record, then resolve the links of the names that were saved.

    Names whose record was skipped keep their current link; they are listed
    in ``store.skipped``.

    Raises:
        OSError: From a failed commit recovery or from link resolution
    """
    written = store.commit(config.registry_dir)
    outcomes = store.sync_links(exclude=store.skipped)
    return written, outcomes
