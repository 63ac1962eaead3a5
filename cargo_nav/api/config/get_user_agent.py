"""User-Agent sent with every registry request."""

from ...constants import PROJECT_URL
from .get_package_version import get_package_version


def get_user_agent() -> str:
    """Identify cargo-nav to registry operators, as crates.io asks clients to do."""
    return f"cargo-nav/{get_package_version()} (+{PROJECT_URL})"
