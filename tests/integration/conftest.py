"""Fixtures for end-to-end tests against a mocked DPD server."""

import base64
import re

import pytest
import responses

VALID_USER = "acme"
VALID_PASSWORD = "secret"

_ANY_PATH = re.compile(r"https://api\.getdpd\.com/v2/.*")


def _authorized(request) -> bool:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Basic "):
        return False
    decoded = base64.b64decode(header[len("Basic ") :]).decode()
    return decoded == f"{VALID_USER}:{VALID_PASSWORD}"


def _handle(request):
    """Mimic the API: 401 without valid basic auth, else echo the path back."""
    if not _authorized(request):
        return 401, {"WWW-Authenticate": 'Basic realm="DPD API"'}, "Unauthorized"
    return 200, {"Content-Type": "application/json"}, '{"ok": true}'


@pytest.fixture
def dpd_server():
    """Every GET under the API root goes through the basic-auth check."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add_callback(responses.GET, _ANY_PATH, callback=_handle)
        yield rsps


@pytest.fixture
def credentials():
    return VALID_USER, VALID_PASSWORD
