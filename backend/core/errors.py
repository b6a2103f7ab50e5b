"""Errors raised by the pollen gateway.

Each error knows the HTTP status and JSON body it should be rendered as, so
the API layer only has to catch :class:`PollenGatewayError` once.
"""
from __future__ import annotations

from typing import Any, Dict


class PollenGatewayError(RuntimeError):
    """Base gateway error."""

    status_code = 500
    error = "Server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.error)

    def as_payload(self) -> Dict[str, Any]:
        return {"error": self.error}


class BadRequest(PollenGatewayError):
    """Raised when lat/lng are missing or not finite numbers."""

    status_code = 400
    error = "Missing or invalid lat/lng query params"


class UpstreamError(PollenGatewayError):
    """Raised when the provider answers with a non-2xx status.

    The upstream status is mirrored to the client when it is a valid HTTP
    status; anything outside 100-599 is answered with 502 instead.
    """

    error = "Pollen API error"

    def __init__(self, status: int, body_preview: str) -> None:
        super().__init__(f"HTTP {status}")
        self.upstream_status = status
        self.status_code = status if 100 <= status <= 599 else 502
        self.body_preview = body_preview

    def as_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "status": self.upstream_status, "bodyPreview": self.body_preview}


class ParseError(PollenGatewayError):
    """Raised when the provider body is not valid JSON."""

    error = "Invalid JSON from Pollen API"

    def __init__(self, body_preview: str) -> None:
        super().__init__()
        self.body_preview = body_preview

    def as_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "bodyPreview": self.body_preview}


class UnexpectedError(PollenGatewayError):
    """Wraps any other failure raised while handling a request."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.details = str(cause)

    def as_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.details}


__all__ = ["PollenGatewayError", "BadRequest", "UpstreamError", "ParseError", "UnexpectedError"]
