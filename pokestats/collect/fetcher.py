"""
Listing page fetcher.

Downloads the listing page with a single blocking GET request.  The
request identifies the tool with a fixed User-Agent.  There is no
retry, no cache and no custom redirect handling; any failure is
reported as a `NetworkError`.
"""

from __future__ import annotations

import logging

import requests

from ..errors import NetworkError
from ..settings import REQUEST_TIMEOUT_SECONDS, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_page(url: str, *, timeout: float = REQUEST_TIMEOUT_SECONDS) -> str:
    """Return the body of ``url`` as text.

    Raises:
        NetworkError: On connection failure, timeout or a non-success
            HTTP status.
    """
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"Failed to download {url}: {exc}") from exc
    logger.debug("Received %d bytes (status %d)", len(resp.content), resp.status_code)
    # requests assumes ISO-8859-1 for text/* without a charset parameter.
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text
