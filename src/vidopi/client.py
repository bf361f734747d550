"""Synchronous and asynchronous clients for the Vidopi video API."""
from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

import httpx

from . import operations
from .config import ClientConfig
from .logging import get_logger
from .models import (
    CutVideoResponse,
    MergeVideoResponse,
    OpenModel,
    ResizeVideoResponse,
    TaskStatusResponse,
    UploadVideoResponse,
)
from .operations import FileInput, Operation
from .request import RequestBuilder, RequestSpec
from .response import interpret_response

log = get_logger(__name__)

_ClientT = TypeVar("_ClientT", bound="_BaseClient")


def _decode(payload: Any, model: Optional[Type[OpenModel]]) -> Any:
    if model is not None and isinstance(payload, dict):
        return model.from_payload(payload)
    return payload


class _BaseClient:
    """State shared by both clients: the immutable config and request builder."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        if config is None:
            config = ClientConfig(api_key=api_key or "", base_url=base_url or "", timeout=timeout)
        self.config = config
        self._builder = RequestBuilder(config)
        log.debug("client.created", client=type(self).__name__, base_url=config.base_url)

    @classmethod
    def from_env(cls: Type[_ClientT], **kwargs: Any) -> _ClientT:
        """Create a client configured from ``VIDOPI_API_KEY``/``VIDOPI_BASE_URL``/``VIDOPI_TIMEOUT``."""

        transport = kwargs.pop("transport", None)
        return cls(config=ClientConfig.from_env(**kwargs), transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _log_request(self, spec: RequestSpec) -> None:
        log.debug("request.sent", method=spec.method, path=spec.path)


class VidopiClient(_BaseClient):
    """Blocking client; every call opens and closes its own HTTP connection."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout=timeout, config=config)
        self._transport = transport

    def __enter__(self) -> "VidopiClient":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        return None

    def _call(self, operation: Operation) -> Any:
        spec, model = operation
        with httpx.Client(transport=self._transport, timeout=self.config.timeout) as http:
            request = self._builder.build(http, spec)
            self._log_request(spec)
            response = http.send(request)
        return _decode(interpret_response(response), model)

    def test_api_key(self) -> Any:
        """Validate the configured key against ``/apikey-test``."""
        return self._call(operations.api_key_test())

    def upload_video(
        self,
        file: FileInput,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Union[UploadVideoResponse, str]:
        """Upload a video as ``multipart/form-data``.

        ``file`` may be raw bytes, a binary file object or a path on disk. The
        name defaults to the file's own name, then ``video.mp4``; the content
        type defaults to ``video/mp4``.
        """
        return self._call(operations.upload_video(file, file_name, content_type))

    def cut_video(
        self,
        public_link: str,
        start_time: float,
        end_time: float,
        webhook_url: Optional[str] = None,
    ) -> Union[CutVideoResponse, str]:
        """Cut ``public_link`` between ``start_time`` and ``end_time`` seconds."""
        return self._call(operations.cut_video(public_link, start_time, end_time, webhook_url))

    def merge_videos(
        self,
        public_link_1: str,
        public_link_2: str,
        webhook_url: Optional[str] = None,
    ) -> Union[MergeVideoResponse, str]:
        """Join two videos, first ``public_link_1`` then ``public_link_2``."""
        return self._call(operations.merge_videos(public_link_1, public_link_2, webhook_url))

    def resize_video(
        self,
        public_link: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        maintain_aspect_ratio: Optional[bool] = None,
        output_format: Optional[str] = None,
        webhook_url: Optional[str] = None,
    ) -> Union[ResizeVideoResponse, str]:
        """Resize a video; options left as ``None`` are not sent."""
        return self._call(
            operations.resize_video(
                public_link,
                width=width,
                height=height,
                maintain_aspect_ratio=maintain_aspect_ratio,
                output_format=output_format,
                webhook_url=webhook_url,
            )
        )

    def get_task_status(self, task_id: str) -> Union[TaskStatusResponse, str]:
        """Fetch the state of an asynchronous processing task."""
        return self._call(operations.get_task_status(task_id))


class AsyncVidopiClient(_BaseClient):
    """``asyncio`` flavour of :class:`VidopiClient` with identical operations."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout=timeout, config=config)
        self._transport = transport

    async def __aenter__(self) -> "AsyncVidopiClient":
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        return None

    async def _call(self, operation: Operation) -> Any:
        spec, model = operation
        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as http:
            request = self._builder.build(http, spec)
            self._log_request(spec)
            response = await http.send(request)
        return _decode(interpret_response(response), model)

    async def test_api_key(self) -> Any:
        return await self._call(operations.api_key_test())

    async def upload_video(
        self,
        file: FileInput,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Union[UploadVideoResponse, str]:
        if isinstance(file, (str, os.PathLike)):
            # Read from disk off the event loop.
            path = Path(file)
            file_name = file_name or path.name
            file = await asyncio.to_thread(path.read_bytes)
        return await self._call(operations.upload_video(file, file_name, content_type))

    async def cut_video(
        self,
        public_link: str,
        start_time: float,
        end_time: float,
        webhook_url: Optional[str] = None,
    ) -> Union[CutVideoResponse, str]:
        return await self._call(operations.cut_video(public_link, start_time, end_time, webhook_url))

    async def merge_videos(
        self,
        public_link_1: str,
        public_link_2: str,
        webhook_url: Optional[str] = None,
    ) -> Union[MergeVideoResponse, str]:
        return await self._call(operations.merge_videos(public_link_1, public_link_2, webhook_url))

    async def resize_video(
        self,
        public_link: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        maintain_aspect_ratio: Optional[bool] = None,
        output_format: Optional[str] = None,
        webhook_url: Optional[str] = None,
    ) -> Union[ResizeVideoResponse, str]:
        return await self._call(
            operations.resize_video(
                public_link,
                width=width,
                height=height,
                maintain_aspect_ratio=maintain_aspect_ratio,
                output_format=output_format,
                webhook_url=webhook_url,
            )
        )

    async def get_task_status(self, task_id: str) -> Union[TaskStatusResponse, str]:
        return await self._call(operations.get_task_status(task_id))


__all__ = ["AsyncVidopiClient", "VidopiClient"]
