"""Registry response decode failure."""

from .FetchError import FetchError


class DecodeError(FetchError):
    """Raised when a 2xx body is not a ``{"crate": {...}}`` record."""

    code = "DECODE_ERROR"

    def __init__(self, url: str, detail: str):
        self.detail = detail
        super().__init__(f"Could not decode crate information from {url}: {detail}", url)
