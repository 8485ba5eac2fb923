"""Candidate target for a link name."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Candidate(BaseModel):
    """One alternative for a name: a target path and its priority.

    Higher priority wins. Candidates are immutable; a priority update
    replaces the candidate.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = Field(..., min_length=1, description="Path the link may point at")
    priority: StrictInt = Field(..., description="Signed priority, higher wins")

    def __str__(self) -> str:
        return f"{self.target}: {self.priority}"
