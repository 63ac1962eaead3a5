"""Registry page URL for a crate."""

from ...constants import DEFAULT_SITE_URL


def canonical_url(name: str, site_url: str = DEFAULT_SITE_URL) -> str:
    """Build ``<site_url>/crates/<name>``.

    The registry API has no field for this page; it follows the crates.io
    URL scheme, so no request is needed.
    """
    return f"{site_url.rstrip('/')}/crates/{name}"
