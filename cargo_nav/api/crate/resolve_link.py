"""Pick the link for a destination."""

from ...constants import DEFAULT_SITE_URL
from .canonical_url import canonical_url
from .CrateInfo import CrateInfo
from .Destination import Destination
from .MissingLinkError import MissingLinkError


def resolve_link(info: CrateInfo, destination: Destination, site_url: str = DEFAULT_SITE_URL) -> str:
    """Return the URL ``destination`` refers to for this crate.

    The crate page is always available. Other links are returned exactly as
    published; an unset or empty field raises.

    Args:
        info: Crate metadata from the registry.
        destination: Which link to pick.
        site_url: Registry web site root used for the crate page.

    Raises:
        MissingLinkError: If the crate does not publish the requested link
    """
    if destination is Destination.CRATE:
        return canonical_url(info.name, site_url)

    link = getattr(info, destination.value)
    if not link:
        raise MissingLinkError(destination.label)
    return link
