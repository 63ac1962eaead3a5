"""Browser launcher abstraction for testability.

Tests substitute their own launcher so no browser window opens.
"""

from abc import ABC, abstractmethod


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Open a URL in the default web browser.

        Args:
            url: The URL to open

        Raises:
            DispatchError: If the browser could not be started
        """
