"""Decoding of Vidopi API responses."""
from __future__ import annotations

import json
from typing import Any

import httpx

from .errors import RequestFailedError
from .logging import get_logger

log = get_logger(__name__)


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_detail(response: httpx.Response, body: Any) -> str:
    if isinstance(body, (dict, list)):
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False)
    return str(body or response.reason_phrase)


def interpret_response(response: httpx.Response) -> Any:
    """Return the decoded body of a 2xx response or raise :class:`RequestFailedError`.

    Bodies labelled ``application/json`` are parsed; anything else comes back
    as the raw text.
    """

    if not response.is_success:
        body = _error_body(response)
        detail = _error_detail(response, body)
        log.debug("response.failed", status_code=response.status_code)
        raise RequestFailedError(response.status_code, body, detail)

    content_type = response.headers.get("content-type", "")
    log.debug("response.received", status_code=response.status_code, content_type=content_type)
    if "application/json" in content_type:
        return response.json()
    return response.text


__all__ = ["interpret_response"]
