"""Exceptions raised by the Vidopi client."""
from __future__ import annotations

from typing import Any

import httpx

# Failures below the HTTP layer are raised by httpx unchanged.
TransportError = httpx.TransportError


class VidopiError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(VidopiError, ValueError):
    """A required setting or parameter is missing; no request was sent."""


class RequestFailedError(VidopiError):
    """The service answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, body: Any, detail: str) -> None:
        self.status_code = status_code
        self.body = body
        self.detail = detail
        super().__init__(f"Vidopi API request failed ({status_code}): {detail}")


__all__ = ["ConfigurationError", "RequestFailedError", "TransportError", "VidopiError"]
