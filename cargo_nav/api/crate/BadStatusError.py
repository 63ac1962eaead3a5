"""Registry non-success status."""

from .FetchError import FetchError


class BadStatusError(FetchError):
    """Raised when the registry answers with a status outside 2xx."""

    code = "BAD_STATUS"

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        super().__init__(f"Got bad status {status_code} from {url}", url)
