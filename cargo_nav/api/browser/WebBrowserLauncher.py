"""BrowserLauncher backed by the standard ``webbrowser`` module."""

import webbrowser

from .BrowserLauncher import BrowserLauncher
from .DispatchError import DispatchError


class WebBrowserLauncher(BrowserLauncher):
    """Production launcher that opens URLs in the system browser."""

    def launch(self, url: str) -> None:
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as e:
            raise DispatchError(url, str(e)) from e
        if not opened:
            raise DispatchError(url, "no runnable browser found")
