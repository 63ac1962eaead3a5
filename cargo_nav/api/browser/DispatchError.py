"""Browser dispatch failure."""

from ..NavError import NavError


class DispatchError(NavError):
    """Raised when a resolved link cannot be handed to the browser."""

    code = "DISPATCH_ERROR"

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__("Could not open the link.")
