"""Typed error hierarchy mapping HTTP status codes from the DPD v2 API."""

from __future__ import annotations


class DPDError(Exception):
    """Base exception for all dpd client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(DPDError):
    """Non-200 response from the API.

    ``log`` holds the response status line followed by every response header,
    one ``name: value`` pair per line, CRLF-separated.
    """

    kind = "unknown"
    template = "Error occurred during request execution."

    def __init__(
        self,
        log: str = "",
        status_code: int | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(f"{self.template} Additional info: {log}")
        self.log = log
        self.status_code = status_code
        self.method = method
        self.path = path


class UnauthorizedError(ApiError):
    """401 — invalid credentials."""

    kind = "unauthorized"
    template = "Error occurred during request execution. Invalid credentials."


class ForbiddenError(ApiError):
    """403 — authenticated but not allowed to access the resource."""

    kind = "forbidden"
    template = "Error occurred during request execution. You don't have access to the resource."


class NotFoundError(ApiError):
    """404 — resource does not exist."""

    kind = "not_found"
    template = "Error occurred during request execution. Resource could not be found."


class ValidationFailedError(ApiError):
    """412 — the request failed validation."""

    kind = "validation_failed"
    template = "Error occurred during request execution. Validation error."


class ServerError(ApiError):
    """500 — upstream server fault."""

    kind = "server_error"
    template = "Error occurred during request execution. Server error."


class ServiceUnavailableError(ApiError):
    """503 — upstream temporarily unavailable. Not retried."""

    kind = "service_unavailable"
    template = "Error occurred during request execution. Service unavailable."


class UnknownApiError(ApiError):
    """Any other non-200 status."""


class InvalidArgumentError(DPDError):
    """A required identifying argument was not supplied."""


class TransportError(DPDError):
    """The request never produced an HTTP status (DNS, refused connection, timeout...)."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[ApiError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    412: ValidationFailedError,
    500: ServerError,
    503: ServiceUnavailableError,
}


def classify(
    status: int, log: str, *, method: str | None = None, path: str | None = None
) -> ApiError:
    """Build the typed error for a non-200 status. Unlisted codes map to UnknownApiError."""
    exc_cls = STATUS_MAP.get(status, UnknownApiError)
    return exc_cls(log, status_code=status, method=method, path=path)
