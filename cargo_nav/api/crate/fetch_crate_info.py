"""Fetch crate metadata from the registry API."""

import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ...constants import DEFAULT_API_URL, DEFAULT_TIMEOUT
from ..config.get_user_agent import get_user_agent
from .BadStatusError import BadStatusError
from .CrateInfo import CrateInfo
from .CrateInfoEnvelope import CrateInfoEnvelope
from .DecodeError import DecodeError
from .TransportError import TransportError

logger = logging.getLogger(__name__)


def fetch_crate_info(
    name: str,
    api_url: str = DEFAULT_API_URL,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> CrateInfo:
    """Fetch ``{api_url}/{name}`` and unwrap the crate record.

    The name is sent as given, even when empty, percent-encoded as a single
    path segment; the registry decides whether it exists. Exactly one request
    is made.

    Args:
        name: Crate name as typed by the user.
        api_url: Registry API root. Tests point this at a local server.
        timeout: Seconds before the request is abandoned.
        user_agent: Override for the identifying User-Agent header.

    Raises:
        TransportError: If no response was received
        BadStatusError: If the status is outside 2xx
        DecodeError: If the body is not a crate record
    """
    # One path segment, so "?" or "#" in a name reaches the registry intact
    url = f"{api_url.rstrip('/')}/{quote(name, safe='')}"
    headers = {
        "User-Agent": user_agent or get_user_agent(),
        "Accept": "application/json",
    }

    logger.debug("GET %s", url)
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(url, e) from e

    logger.debug("Response %s from %s: %s", response.status_code, url, response.text)
    if not 200 <= response.status_code < 300:
        raise BadStatusError(response.status_code, url)

    try:
        envelope = CrateInfoEnvelope.model_validate_json(response.content)
    except ValidationError as e:
        error_list = e.errors()
        detail = error_list[0].get("msg", str(e)) if error_list else str(e)
        raise DecodeError(url, detail) from e

    return envelope.crate
