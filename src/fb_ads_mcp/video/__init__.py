"""Chunked video upload and encoding-status polling."""

from __future__ import annotations

from .uploader import (
    EncodingStatusChecker,
    UploadSession,
    UploadState,
    VideoUploader,
    VideoUploadError,
    VideoUploadResult,
)

__all__ = [
    "EncodingStatusChecker",
    "UploadSession",
    "UploadState",
    "VideoUploadError",
    "VideoUploadResult",
    "VideoUploader",
]
