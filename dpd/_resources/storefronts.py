"""Storefronts resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .._http import HTTPClient


class Storefronts:
    """client.storefronts — list and fetch storefronts."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> bytes:
        return self._http.request("storefronts")

    def get(self, storefront_id: int | str) -> bytes:
        return self._http.request(f"storefronts/{storefront_id}")
