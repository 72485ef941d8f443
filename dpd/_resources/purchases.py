"""Purchases resource — single-filter purchase search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._utils import _first_filter

if TYPE_CHECKING:
    from .._http import HTTPClient


class Purchases:
    """client.purchases — list and fetch purchases."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        *,
        status: str | None = None,
        product_id: int | str | None = None,
        storefront_id: int | str | None = None,
        customer_id: int | str | None = None,
        subscriber_id: int | str | None = None,
        customer_email: str | None = None,
        customer_first_name: str | None = None,
        customer_last_name: str | None = None,
        date_min: str | None = None,
        date_max: str | None = None,
        total: str | float | None = None,
        total_op: str | None = None,
        ship: str | bool | None = None,
    ) -> bytes:
        """List purchases matching at most one filter.

        Only the first non-empty filter, in argument order, is sent; any
        later ones are ignored. E.g. ``list(status="paid", product_id=5)``
        queries ``?status=paid``.

        Args:
            status: Purchase status.
            date_min: Purchases created after this date.
            date_max: Purchases created before this date.
            total: Purchase total, compared using ``total_op``.
            total_op: How to compare ``total``: "eq", "ne", "gt" or "lt".
            ship: Purchases with tangible goods not yet shipped.
        """
        params = _first_filter(
            status=status,
            product_id=product_id,
            storefront_id=storefront_id,
            customer_id=customer_id,
            subscriber_id=subscriber_id,
            customer_email=customer_email,
            customer_first_name=customer_first_name,
            customer_last_name=customer_last_name,
            date_min=date_min,
            date_max=date_max,
            total=total,
            total_op=total_op,
            ship=ship,
        )
        return self._http.request("purchases", params)

    def get(self, purchase_id: int | str) -> bytes:
        return self._http.request(f"purchases/{purchase_id}")
