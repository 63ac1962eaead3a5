"""Requested link absent from crate metadata."""

from ..NavError import NavError


class MissingLinkError(NavError):
    """Raised when the crate does not publish the requested link."""

    code = "MISSING_LINK"

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"The {label} link isn't set for that crate.")
