"""
HTTP transport for fetching raw RFC bodies.

Each fetch is a single GET: no retries, no caching. Any failure (connection
error, timeout, non-2xx status, empty body) is raised as TransportFailure so
the retrieval service can move on to the next format variant.
"""

import logging
from typing import Optional

import requests

from rfc_text.config import get_app_config
from rfc_text.exceptions import TransportFailure

logger = logging.getLogger(__name__)


class RfcTransport:
    """
    Fetches raw document bodies over HTTP using a pooled requests.Session.

    Usage:
        with RfcTransport() as transport:
            body = transport.fetch('https://www.ietf.org/rfc/rfc2616.txt')

    Configuration (via config facade, parameters take precedence):
        - REQUEST_TIMEOUT: seconds before a fetch is abandoned
        - USER_AGENT: User-Agent header
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        config = get_app_config()

        self.timeout = timeout or config.request_timeout
        self.user_agent = user_agent or config.user_agent

        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.user_agent})

    def fetch(self, url: str) -> str:
        """
        Fetch a URL and return its body as text.

        Bodies served without a charset are decoded as UTF-8 (requests would
        otherwise assume ISO-8859-1 for text/plain).

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body

        Raises:
            TransportFailure: On connection errors, timeouts, HTTP errors or
                an empty body
        """
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportFailure(url, e) from e

        content_type = response.headers.get('Content-Type', '')
        if 'charset' in content_type.lower():
            body = response.text
        else:
            body = response.content.decode('utf-8', errors='replace')

        if not body or not body.strip():
            raise TransportFailure(url, "empty response body")

        logger.debug(f"Fetched {url}: {len(body):,} chars")
        return body

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> 'RfcTransport':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
