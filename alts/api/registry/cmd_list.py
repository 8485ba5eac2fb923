"""List candidates for a link name.

Matches CLI: alts list --name <name>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..config.AltsConfig import AltsConfig
from . import RegistryListOutput
from .RegistryStore import RegistryStore


def cmd_list(name: str, config: AltsConfig | None = None) -> StageResult:
    """List the candidates registered for ``name``.

    Args:
        name: Link name to query
        config: Configuration, loaded from the alts home directory if None

    Returns:
        StageResult; unsuccessful if the name is unknown
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        cfg = config if config is not None else AltsConfig.load()

        yield (0.5, "Loading registry...")
        try:
            store = RegistryStore.load(cfg.registry_dir, cfg.link_dir)
        except OSError as e:
            result_obj.output = RegistryListOutput(
                errors=[f"Could not load registry {cfg.registry_dir}: {e}"],
                name=name,
                candidates=[],
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Could not load registry: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        entry = store.get(name)
        if entry is None:
            result_obj.output = RegistryListOutput(
                errors=[f"No alternatives for {name}"],
                name=name,
                candidates=[],
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"No alternatives for {name}"
            result_obj.success = False
            return

        winner = entry.winner()
        result_obj.output = RegistryListOutput(
            name=name,
            link_path=entry.link_path,
            candidates=[candidate.model_dump() for candidate in entry.candidates],
            winner=winner.target if winner is not None else None,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = entry.describe()
        result_obj.success = True

    return StageResult(
        announce=f"Listing alternatives for {name}...",
        progress_callback=do_work,
    )
