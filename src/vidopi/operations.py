"""Request factories, one per Vidopi API capability.

Each factory maps the Python keyword arguments onto the snake_case field
names the service expects and returns a :class:`RequestSpec` together with
the model used to decode a JSON-object answer.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any, Dict, Optional, Tuple, Type, Union
from urllib.parse import quote

from .errors import ConfigurationError
from .models import (
    CutVideoResponse,
    MergeVideoResponse,
    OpenModel,
    ResizeVideoResponse,
    TaskStatusResponse,
    UploadVideoResponse,
)
from .request import RequestSpec

DEFAULT_FILE_NAME = "video.mp4"
DEFAULT_CONTENT_TYPE = "video/mp4"
CONTENT_TYPE_HEADER = "X-Content-Type"

FileInput = Union[bytes, bytearray, memoryview, IO[bytes], str, os.PathLike]
Operation = Tuple[RequestSpec, Optional[Type[OpenModel]]]


def _file_payload(file: FileInput) -> Tuple[Any, Optional[str]]:
    """Return the upload payload and the name it carries, if any."""

    if isinstance(file, (bytes, bytearray, memoryview)):
        return bytes(file), None
    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        return path.read_bytes(), path.name
    if hasattr(file, "read"):
        name = getattr(file, "name", None)
        if isinstance(name, str) and name:
            return file, os.path.basename(name)
        return file, None
    raise TypeError(f"unsupported upload payload: {type(file).__name__}")


def api_key_test() -> Operation:
    return RequestSpec(path="/apikey-test", method="GET"), None


def upload_video(
    file: FileInput,
    file_name: Optional[str] = None,
    content_type: Optional[str] = None,
) -> Operation:
    if file is None:
        raise ConfigurationError('upload_video: "file" is required.')
    payload, own_name = _file_payload(file)
    name = file_name or own_name or DEFAULT_FILE_NAME
    declared_type = content_type or DEFAULT_CONTENT_TYPE
    spec = RequestSpec(
        path="/upload-video/",
        method="POST",
        headers={CONTENT_TYPE_HEADER: declared_type},
        files=("file", (name, payload, declared_type)),
    )
    return spec, UploadVideoResponse


def cut_video(
    public_link: str,
    start_time: float,
    end_time: float,
    webhook_url: Optional[str] = None,
) -> Operation:
    body: Dict[str, Any] = {
        "public_link": public_link,
        "start_time": start_time,
        "end_time": end_time,
    }
    if webhook_url is not None:
        body["webhook_url"] = webhook_url
    return RequestSpec(path="/cut-video/", method="POST", json_body=body), CutVideoResponse


def merge_videos(
    public_link_1: str,
    public_link_2: str,
    webhook_url: Optional[str] = None,
) -> Operation:
    body: Dict[str, Any] = {
        "public_link_1": public_link_1,
        "public_link_2": public_link_2,
    }
    if webhook_url is not None:
        body["webhook_url"] = webhook_url
    return RequestSpec(path="/merge-video/", method="POST", json_body=body), MergeVideoResponse


def resize_video(
    public_link: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    maintain_aspect_ratio: Optional[bool] = None,
    output_format: Optional[str] = None,
    webhook_url: Optional[str] = None,
) -> Operation:
    body: Dict[str, Any] = {"public_link": public_link}
    if webhook_url is not None:
        body["webhook_url"] = webhook_url
    # Unset options are left out so the service applies its own defaults.
    optional = {
        "width": width,
        "height": height,
        "maintain_aspect_ratio": maintain_aspect_ratio,
        "output_format": output_format,
    }
    body.update({key: value for key, value in optional.items() if value is not None})
    return RequestSpec(path="/resize-video/", method="POST", json_body=body), ResizeVideoResponse


def get_task_status(task_id: str) -> Operation:
    if not task_id:
        raise ConfigurationError('get_task_status: "task_id" is required.')
    path = f"/task-status/{quote(str(task_id), safe='')}"
    return RequestSpec(path=path, method="GET"), TaskStatusResponse


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_FILE_NAME",
    "FileInput",
    "Operation",
    "api_key_test",
    "cut_video",
    "get_task_status",
    "merge_videos",
    "resize_video",
    "upload_video",
]
