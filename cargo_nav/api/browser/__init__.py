"""Browser API domain."""

from .BrowserLauncher import BrowserLauncher
from .DispatchError import DispatchError
from .WebBrowserLauncher import WebBrowserLauncher

__all__ = [
    "BrowserLauncher",
    "DispatchError",
    "WebBrowserLauncher",
]
