"""Thin HTTP client wrapping requests.Session with basic auth and error mapping."""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from ._config import ClientConfig
from ._exceptions import TransportError, classify

logger = logging.getLogger(__name__)


def _format_log(resp: requests.Response) -> str:
    """Status line plus every response header, CRLF-joined."""
    lines = [f"{resp.status_code} {resp.reason or ''}".rstrip()]
    for name, value in resp.headers.items():
        # requests already folds repeated headers into one comma-joined value
        lines.append(f"{name}: {value}")
    return "\r\n".join(lines)


def _raise_for_status(resp: requests.Response, *, method: str = "", path: str = "") -> None:
    """Map a non-200 response to its typed exception."""
    log = _format_log(resp)
    logger.debug("%s %s returned %d", method, path, resp.status_code)
    resp.close()
    raise classify(resp.status_code, log, method=method, path=path)


class HTTPClient:
    """Minimal blocking HTTP client: basic auth on every call, no retries.

    Args:
        config: Client configuration; supplies the base URL and the account
            username/password used for basic auth.
        session: Optional pre-configured requests.Session. When given, the
            caller owns it and close() leaves it open.
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self._config = config
        self._base_url = config.base_url
        self._auth = HTTPBasicAuth(config.username, config.password)
        self._owns_session = session is None
        self._session = session or requests.Session()

    def request(
        self, path: str, params: dict[str, Any] | None = None, method: str = "GET"
    ) -> bytes:
        """Send one request and return the raw body of a 200 response.

        Raises:
            ApiError: any non-200 status, as the subclass matching the code.
            TransportError: the request failed before a status was received.
        """
        url = f"{self._base_url}{path.lstrip('/')}"
        logger.debug("%s %s params=%s", method, url, params or {})
        try:
            resp = self._session.request(method, url, params=params or None, auth=self._auth)
        except requests.RequestException as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise TransportError(str(e)) from e

        if resp.status_code != 200:
            _raise_for_status(resp, method=method, path=path)
        return resp.content

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()
