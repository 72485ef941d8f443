"""
Root pytest configuration and fixtures for the dpd client.
"""

from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dpd._config import ClientConfig  # noqa: E402
from dpd._http import HTTPClient  # noqa: E402

_ENV_VARS = ("DPD_PARTNER_NAME", "DPD_PARTNER_TOKEN", "DPD_USERNAME", "DPD_PASSWORD", "DPD_LANGUAGE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real DPD_* credentials out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return ClientConfig(
        partner_name="partner", partner_token="ptoken", username="acme", password="secret"
    )


@pytest.fixture
def http(config):
    client = HTTPClient(config)
    yield client
    client.close()
