"""HTML fetching utilities."""

import logging
from typing import Dict, Optional

import requests

from ..services.config import HTTP_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_html(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = HTTP_TIMEOUT,
) -> str:
    """
    Fetch HTML content from URL in a single attempt.

    Args:
        url: URL to fetch
        headers: Request headers (a generic browser set is used when omitted)
        timeout: Request timeout in seconds

    Returns:
        HTML content as string

    Raises:
        requests.RequestException: If the request fails or returns an error status
    """
    if headers is None:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Upgrade-Insecure-Requests": "1",
        }

    logger.debug(f"GET {url}")
    response = requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)
    response.raise_for_status()
    return response.text
