"""Crate metadata fetch error."""

from ..NavError import NavError


class FetchError(NavError):
    """Raised when crate information cannot be obtained from the registry."""

    code = "FETCH_ERROR"

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)
