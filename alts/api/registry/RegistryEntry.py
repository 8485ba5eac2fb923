"""Registry entry: all candidates for one name."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..filesystem import ensure_dir, make_symlink, read_link, remove_dir, remove_file
from .Candidate import Candidate
from .LinkConflictError import LinkConflictError
from .LinkOutcome import LinkOutcome
from .RecordError import RecordError

logger = logging.getLogger(__name__)


class RegistryEntry(BaseModel):
    """Candidates for one name plus the path of the link resolved from them.

    ``candidates`` keeps insertion order; ties on priority go to the
    candidate added first.
    """

    model_config = ConfigDict(extra="forbid")

    link_path: str = Field(..., min_length=1, description="Where the resolved symlink lives")
    candidates: list[Candidate] = Field(default_factory=list, description="Candidates in insertion order")

    @field_validator("candidates")
    @classmethod
    def _unique_targets(cls, v: list[Candidate]) -> list[Candidate]:
        seen: set[str] = set()
        for candidate in v:
            if candidate.target in seen:
                raise ValueError(f"duplicate target {candidate.target!r}")
            seen.add(candidate.target)
        return v

    def _index_of(self, target: str) -> int | None:
        for i, candidate in enumerate(self.candidates):
            if candidate.target == target:
                return i
        return None

    def add(self, candidate: Candidate) -> bool:
        """Add a candidate or update the priority of an existing target.

        Returns:
            True if the entry changed, False for an identical re-add
        """
        i = self._index_of(candidate.target)
        if i is None:
            self.candidates.append(candidate)
            return True
        if self.candidates[i].priority == candidate.priority:
            return False
        self.candidates[i] = candidate
        return True

    def remove(self, target: str) -> bool:
        """Remove the candidate for ``target``. Unknown targets are a no-op."""
        i = self._index_of(target)
        if i is None:
            return False
        del self.candidates[i]
        return True

    def winner(self) -> Candidate | None:
        """Highest-priority candidate, first one wins ties."""
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.priority)

    def resolve_link(self) -> LinkOutcome:
        """Point ``link_path`` at the winning candidate.

        An existing file or foreign symlink is replaced, an empty directory is
        removed. Directories are never removed recursively.

        Raises:
            LinkConflictError: If the link path is a fifo, socket or device
            OSError: If removing the old path or creating the link fails
        """
        winner = self.winner()
        if winner is None:
            return LinkOutcome.NO_LINK

        link = Path(self.link_path)
        outcome = LinkOutcome.UPDATED
        if link.is_symlink():
            if read_link(link) == winner.target:
                logger.debug("Link %s already points at %s", link, winner.target)
                return LinkOutcome.UNCHANGED
            remove_file(link)
        elif link.is_dir():
            remove_dir(link)
        elif link.is_file():
            remove_file(link)
        elif link.exists():
            raise LinkConflictError(self.link_path)
        else:
            ensure_dir(link.parent)
            outcome = LinkOutcome.CREATED

        make_symlink(winner.target, link)
        logger.info("Linked %s -> %s (priority %d)", link, winner.target, winner.priority)
        return outcome

    def describe(self) -> str:
        """Human-readable listing of the candidates."""
        lines = [f"alternatives for {self.link_path}:"]
        lines.extend(f"    {candidate}" for candidate in self.candidates)
        return "\n".join(lines)

    def to_json(self) -> str:
        """Serialize to the on-disk record format."""
        return json.dumps(self.model_dump(mode="json"), indent=4) + "\n"

    @classmethod
    def from_json(cls, text: str) -> "RegistryEntry":
        """Deserialize a record.

        Raises:
            RecordError: If ``text`` is not valid JSON or not a valid record
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            loc = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{loc}: {first.get('msg', str(e))}" if loc else first.get("msg", str(e))
            raise RecordError(f"Invalid record: {detail}") from e
