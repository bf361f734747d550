"""Python client for the Vidopi video-processing API."""
from .client import AsyncVidopiClient, VidopiClient
from .config import DEFAULT_BASE_URL, ClientConfig
from .errors import ConfigurationError, RequestFailedError, TransportError, VidopiError
from .models import (
    CutVideoResponse,
    MergeVideoResponse,
    ResizeVideoResponse,
    TaskStatus,
    TaskStatusResponse,
    UploadedFileInfo,
    UploadVideoResponse,
    resolve_public_link,
)

__all__ = [
    "AsyncVidopiClient",
    "ClientConfig",
    "ConfigurationError",
    "CutVideoResponse",
    "DEFAULT_BASE_URL",
    "MergeVideoResponse",
    "RequestFailedError",
    "ResizeVideoResponse",
    "TaskStatus",
    "TaskStatusResponse",
    "TransportError",
    "UploadVideoResponse",
    "UploadedFileInfo",
    "VidopiClient",
    "VidopiError",
    "resolve_public_link",
]
