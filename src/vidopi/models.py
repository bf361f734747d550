"""Response models for the Vidopi API.

The service adds fields over time, so every model accepts and keeps unknown
keys (available through ``model_extra``) instead of rejecting them.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class TaskStatus(str, Enum):
    """Task states the service is known to report.

    Status fields are typed as plain strings, so values outside this list are
    accepted as-is.
    """

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class OpenModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "OpenModel":
        """Validate ``payload``, keeping it unvalidated when a known field has an unexpected type."""

        try:
            return cls.model_validate(payload)
        except ValidationError:
            return cls.model_construct(**payload)


class UploadedFileInfo(OpenModel):
    """Descriptor of a stored upload."""

    file_id: Optional[str] = None
    original_filename: Optional[str] = None
    stored_filename: Optional[str] = None
    file_path: Optional[str] = None
    file_size: Optional[Union[int, str]] = None
    upload_time: Optional[str] = None
    expires_at: Optional[str] = None
    status: Optional[str] = None
    public_link: Optional[str] = None


class UploadVideoResponse(OpenModel):
    task_id: Optional[str] = None
    status: Optional[str] = None
    public_link: Optional[str] = None
    file_info: Optional[UploadedFileInfo] = None

    @property
    def resolved_public_link(self) -> Optional[str]:
        """Public link of the upload, wherever the service put it."""
        return resolve_public_link(self)


class CutVideoResponse(OpenModel):
    task_id: Optional[str] = None
    status: Optional[str] = None
    download_url: Optional[str] = None


class MergeVideoResponse(OpenModel):
    task_id: Optional[str] = None
    status: Optional[str] = None
    download_url: Optional[str] = None


class ResizeVideoResponse(OpenModel):
    task_id: Optional[str] = None
    status: Optional[str] = None
    download_url: Optional[str] = None


class TaskStatusErrorResult(OpenModel):
    error: Any = None


class TaskStatusResponse(OpenModel):
    status: Optional[str] = Field(default=None, description="Task state, see TaskStatus")
    result: Optional[Union[TaskStatusErrorResult, str]] = None
    download_url: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status in (TaskStatus.SUCCESS.value, TaskStatus.FAILED.value)


def _lookup(source: Union[BaseModel, Mapping[str, Any], None], key: str) -> Any:
    if source is None:
        return None
    if isinstance(source, BaseModel):
        value = getattr(source, key, None)
        if value is None and source.model_extra:
            value = source.model_extra.get(key)
        return value
    if isinstance(source, Mapping):
        return source.get(key)
    return None


def resolve_public_link(payload: Union[BaseModel, Mapping[str, Any], None]) -> Optional[str]:
    """Return the public link of an upload response.

    Newer responses nest it under ``file_info``; older ones put it at the top
    level. The nested value is checked first.
    """

    nested = _lookup(_lookup(payload, "file_info"), "public_link")
    if nested:
        return nested
    return _lookup(payload, "public_link") or None


__all__ = [
    "CutVideoResponse",
    "MergeVideoResponse",
    "OpenModel",
    "ResizeVideoResponse",
    "TaskStatus",
    "TaskStatusErrorResult",
    "TaskStatusResponse",
    "UploadVideoResponse",
    "UploadedFileInfo",
    "resolve_public_link",
]
