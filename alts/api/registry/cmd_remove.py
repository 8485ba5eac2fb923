"""Remove a candidate from a link name.

Matches CLI: alts remove --target <target> --name <name>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..config.AltsConfig import AltsConfig
from . import RegistryRemoveOutput
from ._commit_and_sync import _commit_and_sync
from .InvalidNameError import InvalidNameError
from .RegistryStore import RegistryStore
from .validate_name import validate_name


def cmd_remove(name: str, target: str, config: AltsConfig | None = None) -> StageResult:
    """Remove ``target`` from the candidates of ``name``.

    Removing an unknown target or name is a successful no-op.

    Returns:
        StageResult with all 4 stages of data
    """

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        changed: bool = False,
        bytes_written: int = 0,
        link_outcome: str | None = None,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        result_obj.output = RegistryRemoveOutput(
            errors=errors or [],
            warnings=warnings or [],
            name=name,
            target=target,
            changed=changed,
            bytes_written=bytes_written,
            link_outcome=link_outcome,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        cfg = config if config is not None else AltsConfig.load()

        try:
            validate_name(name)
        except InvalidNameError as e:
            _build_result(result_obj, False, str(e), errors=[str(e)])
            return

        yield (0.2, "Loading registry...")
        try:
            store = RegistryStore.load(cfg.registry_dir, cfg.link_dir)
        except OSError as e:
            _build_result(result_obj, False, f"Could not load registry: {e}", errors=[str(e)])
            return

        yield (0.4, "Removing candidate...")
        if not store.remove_candidate(name, target):
            yield (1.0, "Complete")
            _build_result(
                result_obj,
                True,
                f"{target} is not registered for {name}",
                warnings=[f"{target} is not registered for {name}"],
            )
            return

        yield (0.6, "Committing registry and syncing links...")
        try:
            written, outcomes = _commit_and_sync(store, cfg)
        except OSError as e:
            _build_result(result_obj, False, f"Could not update alternatives: {e}", changed=True, errors=[str(e)])
            return

        if name in store.skipped:
            message = f"Could not save the record for {name}; its link was left unchanged"
            _build_result(result_obj, False, message, changed=True, bytes_written=written, errors=[message])
            return

        yield (1.0, "Complete")
        outcome = outcomes.get(name)
        _build_result(
            result_obj,
            True,
            f"Removed {target} from {name}",
            changed=True,
            bytes_written=written,
            link_outcome=outcome.value if outcome is not None else None,
        )

    return StageResult(
        announce=f"Removing {target} from {name}...",
        progress_callback=do_work,
    )
