"""Immutable client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_LANGUAGE = "fr_FR"


def _or_env(value: str | None, name: str, default: str = "") -> str:
    return value if value is not None else os.environ.get(name, default)


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and defaults for one client, fixed for its lifetime.

    Credentials are opaque and never checked locally; a wrong or empty
    username/password only shows up as a 401 from the API.
    """

    partner_name: str
    partner_token: str
    username: str
    password: str = field(repr=False)
    language: str = DEFAULT_LANGUAGE
    version: str = field(default="100", init=False)
    base_url: str = field(default="https://api.getdpd.com/v2/", init=False)

    @classmethod
    def from_env(
        cls,
        partner_name: str | None = None,
        partner_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        language: str | None = None,
    ) -> ClientConfig:
        """Build a config, falling back to DPD_* environment variables for unset values.

        Only None counts as unset; an explicit value, even "", always wins.
        """
        return cls(
            partner_name=_or_env(partner_name, "DPD_PARTNER_NAME"),
            partner_token=_or_env(partner_token, "DPD_PARTNER_TOKEN"),
            username=_or_env(username, "DPD_USERNAME"),
            password=_or_env(password, "DPD_PASSWORD"),
            language=_or_env(language, "DPD_LANGUAGE", DEFAULT_LANGUAGE),
        )
