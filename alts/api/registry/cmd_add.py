"""Add a candidate for a link name.

Matches CLI: alts add --target <target> --name <name> --weight <weight>
"""

from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from ..config.AltsConfig import AltsConfig
from . import RegistryAddOutput
from ._commit_and_sync import _commit_and_sync
from .Candidate import Candidate
from .InvalidNameError import InvalidNameError
from .RegistryStore import RegistryStore
from .validate_name import validate_name


def cmd_add(name: str, target: str, priority: int, config: AltsConfig | None = None) -> StageResult:
    """Add ``target`` as a candidate for ``name`` or update its priority.

    A change is committed and the links are resolved; a no-op touches nothing.

    Args:
        name: Link name
        target: Path the link may point at
        priority: Signed priority, higher wins
        config: Configuration, loaded from the alts home directory if None

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
    ) -> None:
        result_obj.output = RegistryAddOutput(
            errors=errors or [],
            warnings=[],
            name=name,
            target=target,
            priority=priority,
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

        try:
            candidate = Candidate(target=target, priority=priority)
        except ValidationError as e:
            _build_result(result_obj, False, f"Invalid candidate: {e.errors()[0]['msg']}", errors=[str(e)])
            return

        yield (0.2, "Loading registry...")
        try:
            store = RegistryStore.load(cfg.registry_dir, cfg.link_dir)
        except OSError as e:
            _build_result(result_obj, False, f"Could not load registry: {e}", errors=[str(e)])
            return

        yield (0.4, "Adding candidate...")
        if not store.add_candidate(name, candidate):
            yield (1.0, "Complete")
            _build_result(result_obj, True, f"{target} is already registered for {name} with priority {priority}")
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
            f"Added {target} to {name} with priority {priority}",
            changed=True,
            bytes_written=written,
            link_outcome=outcome.value if outcome is not None else None,
        )

    return StageResult(
        announce=f"Adding {target} to {name} with priority {priority}...",
        progress_callback=do_work,
    )
