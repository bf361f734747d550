from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest

from vidopi import AsyncVidopiClient, VidopiClient

API_KEY = "test-key"


class Recorder:
    """Mock transport handler that keeps every request it receives."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


def json_responder(payload, status_code: int = 200):
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder(json_responder({"task_id": "task-1", "status": "PENDING"}))


@pytest.fixture()
def client(recorder: Recorder) -> VidopiClient:
    return VidopiClient(api_key=API_KEY, transport=httpx.MockTransport(recorder))


@pytest.fixture()
def async_client(recorder: Recorder) -> AsyncVidopiClient:
    return AsyncVidopiClient(api_key=API_KEY, transport=httpx.MockTransport(recorder))
