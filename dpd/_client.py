"""DPD client — entry point for the getdpd.com v2 REST API."""

from __future__ import annotations

import requests

from ._config import ClientConfig
from ._http import HTTPClient
from ._resources import Customers, Products, Purchases, Storefronts, Subscribers


class DPD:
    """Client for the DPD v2 API.

    Usage:
        client = DPD("partner", "token", username="acme", password="secret")
        body = client.purchases.list(status="paid")
        client.subscribers.verify(3, subscriber_mail="a@b.com")

    Any credential not passed falls back to the matching DPD_* environment
    variable. Each method returns the raw response body.
    """

    def __init__(
        self,
        partner_name: str | None = None,
        partner_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        language: str | None = None,
        session: requests.Session | None = None,
    ):
        self.config = ClientConfig.from_env(
            partner_name=partner_name,
            partner_token=partner_token,
            username=username,
            password=password,
            language=language,
        )
        self._http = HTTPClient(self.config, session=session)
        self.storefronts = Storefronts(self._http)
        self.products = Products(self._http)
        self.purchases = Purchases(self._http)
        self.subscribers = Subscribers(self._http)
        self.customers = Customers(self._http)

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> DPD:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
