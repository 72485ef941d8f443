"""Products resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._utils import _build_params

if TYPE_CHECKING:
    from .._http import HTTPClient


class Products:
    """client.products — list products, optionally scoped to one storefront."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self, *, storefront_id: int | str | None = None) -> bytes:
        params = _build_params(storefront_id=storefront_id)
        return self._http.request("products", params)

    def get(self, product_id: int | str) -> bytes:
        return self._http.request(f"products/{product_id}")
