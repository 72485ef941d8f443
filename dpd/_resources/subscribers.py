"""Subscribers resource — per-storefront subscriber lookup and verification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._exceptions import InvalidArgumentError
from ._utils import _is_empty

if TYPE_CHECKING:
    from .._http import HTTPClient

_MISSING_IDENTIFIER = "Please specify either the subscriber's id or the subscriber's mail"


class Subscribers:
    """client.subscribers — subscribers of a storefront."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self, storefront_id: int | str) -> bytes:
        return self._http.request(f"storefronts/{storefront_id}/subscribers")

    def get(
        self,
        storefront_id: int | str,
        *,
        subscriber_id: int | str | None = None,
        subscriber_mail: str | None = None,
    ) -> bytes:
        """Fetch one subscriber by id, or by username (mail) when no id is given."""
        if not _is_empty(subscriber_id):
            return self._http.request(f"storefronts/{storefront_id}/subscribers/{subscriber_id}")
        if not _is_empty(subscriber_mail):
            return self._http.request(
                f"storefronts/{storefront_id}/subscribers", {"username": subscriber_mail}
            )
        raise InvalidArgumentError(_MISSING_IDENTIFIER)

    def verify(
        self,
        storefront_id: int | str,
        *,
        subscriber_id: int | str | None = None,
        subscriber_mail: str | None = None,
    ) -> bytes:
        """Return the subscription status of a subscriber. The id wins over the mail."""
        if not _is_empty(subscriber_id):
            params = {"id": subscriber_id}
        elif not _is_empty(subscriber_mail):
            params = {"username": subscriber_mail}
        else:
            raise InvalidArgumentError(_MISSING_IDENTIFIER)
        return self._http.request(f"storefronts/{storefront_id}/subscribers/verify", params)
