"""
dpd - Python client for the DPD (getdpd.com) REST API.
"""

__version__ = "0.1.0"

from ._client import DPD
from ._config import ClientConfig
from ._exceptions import (
    STATUS_MAP,
    ApiError,
    DPDError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    ServerError,
    ServiceUnavailableError,
    TransportError,
    UnauthorizedError,
    UnknownApiError,
    ValidationFailedError,
    classify,
)

__all__ = [
    "STATUS_MAP",
    "ApiError",
    "ClientConfig",
    "DPD",
    "DPDError",
    "ForbiddenError",
    "InvalidArgumentError",
    "NotFoundError",
    "ServerError",
    "ServiceUnavailableError",
    "TransportError",
    "UnauthorizedError",
    "UnknownApiError",
    "ValidationFailedError",
    "classify",
]
