"""Get cargo-nav home directory path or path under it."""

import os
from pathlib import Path

from ...constants import NAV_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get cargo-nav home directory path or path under it.

    Checks CARGO_NAV_HOME first, then HOME, then falls back to the user's
    home directory.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.cargo-nav")
        >>> get_home_dir("config.json")
        Path("/home/user/.cargo-nav/config.json")
    """
    nav_home_env = os.environ.get("CARGO_NAV_HOME")
    if nav_home_env:
        nav_home = Path(nav_home_env).expanduser().resolve()
    else:
        # HOME is checked explicitly so tests can isolate the config file
        home_env = os.environ.get("HOME")
        if home_env:
            nav_home = Path(home_env) / NAV_HOME_EXT
        else:
            nav_home = Path.home() / NAV_HOME_EXT

    return nav_home / Path(*parts) if parts else nav_home
