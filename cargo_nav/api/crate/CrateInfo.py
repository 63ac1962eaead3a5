"""Crate metadata as published by the registry."""

from pydantic import BaseModel, ConfigDict, Field


class CrateInfo(BaseModel):
    """The subset of a crates.io ``crate`` record that holds its links.

    Field names match the ``Destination`` values they answer, so a
    destination can be looked up by name.
    """

    # crates.io adds fields over time; anything not modelled here is dropped
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=1, description="Crate name")
    homepage: str | None = Field(None, description="Project homepage link")
    documentation: str | None = Field(None, description="Documentation link")
    repository: str | None = Field(None, description="Source repository link")
