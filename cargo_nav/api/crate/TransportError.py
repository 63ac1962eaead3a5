"""Registry transport failure."""

from .FetchError import FetchError


class TransportError(FetchError):
    """Raised when no HTTP response was received (DNS, connect, timeout)."""

    code = "TRANSPORT_ERROR"

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(f"Could not reach {url}: {cause}", url)
