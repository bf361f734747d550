"""Request construction for the Vidopi API."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from .config import ClientConfig

API_KEY_HEADER = "X-API-Key"
JSON_CONTENT_TYPE = "application/json"

QueryValue = Union[str, int, float, bool, None]
# (field name, (file name, payload, content type))
MultipartFile = Tuple[str, Tuple[str, Any, str]]


@dataclass(slots=True)
class RequestSpec:
    """Everything needed to issue one API call, relative to the base URL."""

    path: str
    method: str = "GET"
    query: Dict[str, QueryValue] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json_body: Optional[Dict[str, Any]] = None
    files: Optional[MultipartFile] = None

    def __post_init__(self) -> None:
        if self.json_body is not None and self.files is not None:
            raise ValueError("a request carries either a JSON body or a multipart file, not both")


def encode_query(query: Mapping[str, QueryValue]) -> Dict[str, str]:
    """Stringify query values, dropping the ones that are ``None``."""

    params: Dict[str, str] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def encode_json(body: Mapping[str, Any]) -> bytes:
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class RequestBuilder:
    """Turn a :class:`RequestSpec` into an authenticated ``httpx.Request``."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def url(self, path: str) -> str:
        return self.config.base_url + path

    def headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        merged = {key: value for key, value in (extra or {}).items() if key.lower() != API_KEY_HEADER.lower()}
        merged[API_KEY_HEADER] = self.config.api_key
        return merged

    def build(self, http: Union[httpx.Client, httpx.AsyncClient], spec: RequestSpec) -> httpx.Request:
        headers = self.headers(spec.headers)
        kwargs: Dict[str, Any] = {}
        if spec.json_body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            kwargs["content"] = encode_json(spec.json_body)
        elif spec.files is not None:
            # httpx writes the multipart Content-Type and boundary itself.
            kwargs["files"] = [spec.files]
        params = encode_query(spec.query)
        return http.build_request(
            spec.method,
            self.url(spec.path),
            params=params or None,
            headers=headers,
            **kwargs,
        )


__all__ = ["API_KEY_HEADER", "RequestBuilder", "RequestSpec", "encode_json", "encode_query"]
