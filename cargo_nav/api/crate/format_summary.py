"""One-line overview of a crate's links."""

from ...constants import DEFAULT_SITE_URL
from .canonical_url import canonical_url
from .CrateInfo import CrateInfo

# Display order is fixed regardless of the order fields arrive in
_LABELLED_FIELDS = (
    ("Homepage", "homepage"),
    ("Documentation", "documentation"),
    ("Repository", "repository"),
)


def format_summary(info: CrateInfo, site_url: str = DEFAULT_SITE_URL) -> str:
    """Render every set link as ``Label: value`` joined by ``", "``."""
    pairs = []
    for label, field_name in _LABELLED_FIELDS:
        value = getattr(info, field_name)
        if value:
            pairs.append(f"{label}: {value}")

    if not pairs:
        return f"No links found for crate '{info.name}'; browse {canonical_url(info.name, site_url)} to look it up manually."
    return ", ".join(pairs)
