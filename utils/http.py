"""HTTP utilities for fetching the rainfall CSVs.

Provides:
- Connection pooling and session management
- A single-shot text fetch that fails on any non-success status

No retry adapter is mounted; a failed fetch fails the caller.
"""

from typing import Optional

import requests
from requests.adapters import HTTPAdapter


class SessionManager:
    """Manages a pooled HTTP session."""

    def __init__(self, pool_connections: int = 4, pool_maxsize: int = 8):
        """Initialize session manager.

        Args:
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum number of connections per pool
        """
        self.pool_connections = pool_connections
        self.pool_maxsize = pool_maxsize
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session.

        Returns:
            requests.Session object
        """
        if self._session is None:
            self._session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=self.pool_connections,
                pool_maxsize=self.pool_maxsize,
            )
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

        return self._session

    def close(self) -> None:
        """Close the session and release resources."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def fetch_text(url: str, session: Optional[requests.Session] = None,
               timeout: float = 30, encoding: str = "utf-8") -> str:
    """GET ``url`` and return the body decoded as ``encoding``.

    The body is decoded explicitly instead of trusting the server's charset
    so a BOM survives for the parser to strip.

    Args:
        url: URL to fetch
        session: Optional requests.Session (default: new session)
        timeout: Request timeout in seconds

    Returns:
        Decoded response body

    Raises:
        requests.HTTPError: On a non-success status
        requests.RequestException: On any transport failure
    """
    if session is None:
        session = requests.Session()

    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content.decode(encoding)
