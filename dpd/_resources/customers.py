"""Customers resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._utils import _first_filter

if TYPE_CHECKING:
    from .._http import HTTPClient


class Customers:
    """client.customers — list and fetch customers."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        *,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        product_id: int | str | None = None,
        receives_newsletters: bool | None = None,
        date_min: str | None = None,
        date_max: str | None = None,
    ) -> bytes:
        """List customers matching at most one filter (first non-empty, in argument order)."""
        params = _first_filter(
            email=email,
            first_name=first_name,
            last_name=last_name,
            product_id=product_id,
            receives_newsletters=receives_newsletters,
            date_min=date_min,
            date_max=date_max,
        )
        return self._http.request("customers", params)

    def get(self, customer_id: int | str) -> bytes:
        return self._http.request(f"customers/{customer_id}")
