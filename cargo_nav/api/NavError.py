"""Base error for cargo-nav."""


class NavError(Exception):
    """Base class for every failure the open pipeline reports to the user."""

    code: str = "UNKNOWN"
