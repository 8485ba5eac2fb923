"""Output schemas for registry commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RegistryListOutput(BaseOutputSchema):
    """Output schema for list command."""
    name: str = Field(..., description="Link name that was queried")
    link_path: str | None = Field(None, description="Path of the resolved link, None if name is unknown")
    candidates: list[dict[str, str | int]] = Field(..., description="Candidates as {target, priority} in insertion order")
    winner: str | None = Field(None, description="Target of the highest-priority candidate, None if there is none")
    success: bool = Field(..., description="Whether the name was found")


class RegistryAddOutput(BaseOutputSchema):
    """Output schema for add command."""
    name: str = Field(..., description="Link name")
    target: str = Field(..., description="Candidate target")
    priority: int = Field(..., description="Candidate priority")
    changed: bool = Field(..., description="Whether the registry changed")
    bytes_written: int = Field(..., description="Bytes written by commit, 0 if nothing was committed")
    link_outcome: str | None = Field(None, description="Link resolution outcome for the name, None if not synced")
    success: bool = Field(..., description="Whether add completed successfully")


class RegistryRemoveOutput(BaseOutputSchema):
    """Output schema for remove command."""
    name: str = Field(..., description="Link name")
    target: str = Field(..., description="Candidate target")
    changed: bool = Field(..., description="Whether the registry changed")
    bytes_written: int = Field(..., description="Bytes written by commit, 0 if nothing was committed")
    link_outcome: str | None = Field(None, description="Link resolution outcome for the name, None if not synced")
    success: bool = Field(..., description="Whether remove completed successfully")


class RegistrySyncOutput(BaseOutputSchema):
    """Output schema for sync command."""
    outcomes: dict[str, str] = Field(..., description="Link resolution outcome per name")
    success: bool = Field(..., description="Whether every link was resolved")


register_output_schema("registry", "list", RegistryListOutput)
register_output_schema("registry", "add", RegistryAddOutput)
register_output_schema("registry", "remove", RegistryRemoveOutput)
register_output_schema("registry", "sync", RegistrySyncOutput)
