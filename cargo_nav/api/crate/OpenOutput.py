"""Output schema for the open command."""

from pydantic import BaseModel, Field


class OpenOutput(BaseModel):
    """Output structure of ``cmd_open``.

    - errors: list[str] - underlying failure causes, empty list on success
    - warnings: list[str] - non-fatal notes, empty list if none
    - crate: str - crate name as requested
    - destination: str - canonical destination value
    - url: str | None - resolved link, None if resolution did not complete
    - summary: str | None - overview of the crate's links, None if the crate was not fetched
    - dispatched: bool - True once the link was handed to the browser
    """

    errors: list[str] = Field(default_factory=list, description="List of error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="List of warning messages, empty list if no warnings")
    crate: str = Field(..., description="Crate name as requested")
    destination: str = Field(..., description="Canonical destination value")
    url: str | None = Field(None, description="Resolved link, None if resolution did not complete")
    summary: str | None = Field(None, description="Overview of the crate's links, None if the crate was not fetched")
    dispatched: bool = Field(False, description="True once the link was handed to the browser")
