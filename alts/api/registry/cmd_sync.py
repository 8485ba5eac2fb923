"""Resolve every registered link without changing the registry.

Matches CLI: alts sync
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..config.AltsConfig import AltsConfig
from . import RegistrySyncOutput
from .RegistryStore import RegistryStore


def cmd_sync(config: AltsConfig | None = None) -> StageResult:
    """Point every link at its highest-priority candidate."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        cfg = config if config is not None else AltsConfig.load()

        yield (0.4, "Loading registry...")
        try:
            store = RegistryStore.load(cfg.registry_dir, cfg.link_dir)
            yield (0.7, "Syncing links...")
            outcomes = store.sync_links()
        except OSError as e:
            result_obj.output = RegistrySyncOutput(errors=[str(e)], outcomes={}, success=False).model_dump(
                mode="python"
            )
            result_obj.result = f"Could not sync links: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RegistrySyncOutput(
            outcomes={name: outcome.value for name, outcome in outcomes.items()},
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Synced {len(outcomes)} link(s)"
        result_obj.success = True

    return StageResult(
        announce="Syncing links...",
        progress_callback=do_work,
    )
