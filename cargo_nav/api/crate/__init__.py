"""Crate API domain: fetch crate metadata and resolve its links."""

from .BadStatusError import BadStatusError
from .canonical_url import canonical_url
from .cmd_open import cmd_open
from .CrateInfo import CrateInfo
from .CrateInfoEnvelope import CrateInfoEnvelope
from .DecodeError import DecodeError
from .Destination import Destination
from .fetch_crate_info import fetch_crate_info
from .FetchError import FetchError
from .format_summary import format_summary
from .MissingLinkError import MissingLinkError
from .OpenOutput import OpenOutput
from .resolve_link import resolve_link
from .TransportError import TransportError

__all__ = [
    "BadStatusError",
    "CrateInfo",
    "CrateInfoEnvelope",
    "DecodeError",
    "Destination",
    "FetchError",
    "MissingLinkError",
    "OpenOutput",
    "TransportError",
    "canonical_url",
    "cmd_open",
    "fetch_crate_info",
    "format_summary",
    "resolve_link",
]
