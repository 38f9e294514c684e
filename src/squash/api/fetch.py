"""Plain JSON GET helper."""
from __future__ import annotations
import logging
from typing import Any

import httpx

from squash.common.exceptions import RemoteServiceError

LOGGER = logging.getLogger("squash.api.fetch")

def fetch_json(url: str, timeout: float | None = None, transport: httpx.BaseTransport | None = None) -> Any:
    """
    GET a URL and decode its JSON body.

    Args:
        url: Resource to fetch.
        timeout: Seconds to wait, None for no limit.
        transport: Optional httpx transport.
    """
    LOGGER.debug("GET %s", url)
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True, transport=transport) as client:
            r = client.get(url)
        return r.json()
    except httpx.HTTPError as e:
        LOGGER.warning("Fetching %s failed: %s", url, e)
        raise RemoteServiceError(str(e)) from e
    except ValueError as e:
        LOGGER.warning("Reply from %s is not JSON", url)
        raise RemoteServiceError(str(e)) from e
