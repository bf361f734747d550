from __future__ import annotations

import asyncio

import httpx
import pytest

from conftest import API_KEY, Recorder, json_responder
from vidopi import (
    AsyncVidopiClient,
    ConfigurationError,
    MergeVideoResponse,
    RequestFailedError,
    ResizeVideoResponse,
    UploadVideoResponse,
)


def test_async_operations_share_wire_format(async_client: AsyncVidopiClient, recorder: Recorder) -> None:
    async def scenario():
        resized = await async_client.resize_video("https://x/y.mp4", width=640)
        merged = await async_client.merge_videos("https://x/a.mp4", "https://x/b.mp4")
        return resized, merged

    resized, merged = asyncio.run(scenario())
    resize_request, merge_request = recorder.requests
    assert resize_request.headers["X-API-Key"] == API_KEY
    assert resize_request.content == b'{"public_link":"https://x/y.mp4","width":640}'
    assert merge_request.url.path == "/merge-video/"
    assert isinstance(resized, ResizeVideoResponse)
    assert isinstance(merged, MergeVideoResponse)


def test_async_concurrent_calls(async_client: AsyncVidopiClient, recorder: Recorder) -> None:
    async def scenario():
        return await asyncio.gather(*(async_client.get_task_status(f"task-{n}") for n in range(3)))

    results = asyncio.run(scenario())
    assert len(results) == 3
    assert sorted(request.url.path for request in recorder.requests) == [
        "/task-status/task-0",
        "/task-status/task-1",
        "/task-status/task-2",
    ]


def test_async_upload_nested_link(async_client: AsyncVidopiClient, recorder: Recorder) -> None:
    recorder.responder = json_responder({"public_link": "https://cdn/top.mp4"})
    result = asyncio.run(async_client.upload_video(b"bytes", file_name="a.mp4"))
    assert b'filename="a.mp4"' in recorder.last.content
    assert isinstance(result, UploadVideoResponse)
    assert result.resolved_public_link == "https://cdn/top.mp4"


def test_async_empty_task_id_sends_nothing(async_client: AsyncVidopiClient, recorder: Recorder) -> None:
    with pytest.raises(ConfigurationError):
        asyncio.run(async_client.get_task_status(""))
    assert recorder.requests == []


def test_async_error_and_text_paths(async_client: AsyncVidopiClient, recorder: Recorder) -> None:
    recorder.responder = lambda request: httpx.Response(401, text="invalid key")
    with pytest.raises(RequestFailedError, match=r"\(401\): invalid key"):
        asyncio.run(async_client.test_api_key())

    recorder.responder = lambda request: httpx.Response(200, text="OK", headers={"content-type": "text/plain"})
    assert asyncio.run(async_client.test_api_key()) == "OK"


def test_async_context_manager() -> None:
    recorder = Recorder(json_responder({"valid": True}))

    async def scenario():
        async with AsyncVidopiClient(API_KEY, "https://host/", transport=httpx.MockTransport(recorder)) as client:
            return await client.test_api_key()

    assert asyncio.run(scenario()) == {"valid": True}
    assert str(recorder.last.url) == "https://host/apikey-test"


def test_async_upload_from_path(async_client: AsyncVidopiClient, recorder: Recorder, tmp_path) -> None:
    clip = tmp_path / "clip.mov"
    clip.write_bytes(b"mov-data")
    asyncio.run(async_client.upload_video(clip))
    assert b'filename="clip.mov"' in recorder.last.content
    assert b"mov-data" in recorder.last.content


def test_async_from_env_returns_async_client(monkeypatch) -> None:
    monkeypatch.setenv("VIDOPI_API_KEY", "env-key")
    client = AsyncVidopiClient.from_env(base_url="https://host/")
    assert isinstance(client, AsyncVidopiClient)
    assert client.base_url == "https://host"
