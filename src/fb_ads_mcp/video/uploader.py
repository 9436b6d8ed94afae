"""Resumable chunked video upload to an ad account's ``advideos`` edge.

An upload runs through ``start``, one ``transfer`` per chunk the vendor asks
for, and ``finish``; it can then poll the video until encoding is done.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Mapping

from ..config import get_settings
from ..errors import ErrorKind, GraphApiError, MCPException, McpError, McpErrorCode
from ..graph.gateway import GraphGateway
from ..logging import get_logger

logger = get_logger(__name__)

OFFSET_DESYNC_SUBCODE = 1363037
RETRY_UNIT_BYTES = 10 * 1024 * 1024

DEFAULT_ENCODING_TIMEOUT = 180.0
MIN_ENCODING_TIMEOUT = 30.0
MAX_ENCODING_TIMEOUT = 600.0
DEFAULT_POLL_INTERVAL = 3.0
MIN_POLL_INTERVAL = 1.0
MAX_POLL_INTERVAL = 30.0


class UploadState(str, Enum):
    IDLE = "idle"
    STARTING = "starting"
    TRANSFERRING = "transferring"
    FINISHING = "finishing"
    ENCODING_WAIT = "encoding_wait"
    DONE = "done"
    FAILED = "failed"


class VideoUploadError(MCPException):
    def __init__(
        self,
        message: str,
        *,
        code: McpErrorCode = McpErrorCode.VALIDATION,
        details: Mapping[str, Any] | None = None,
    ):
        super().__init__(McpError(kind=ErrorKind.VENDOR, code=code, message=message, details=details))


@dataclass(slots=True)
class VideoUploadResult:
    video_id: str
    title: str
    description: str | None = None
    status: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


def retry_budget(file_size: int) -> int:
    """Retries allowed per chunk: at least two, one more per 10 MiB of file."""

    return max(2, file_size // RETRY_UNIT_BYTES)


def ad_account_path(account_id: str) -> str:
    account_id = account_id.strip()
    return account_id if account_id.startswith("act_") else f"act_{account_id}"


def _offset(payload: Mapping[str, Any], key: str) -> int:
    try:
        return int(payload[key])
    except (KeyError, TypeError, ValueError) as exc:
        raise VideoUploadError(
            f"Upload response is missing a valid {key}",
            code=McpErrorCode.REMOTE_5XX,
            details={"response": dict(payload)},
        ) from exc


def _read_chunk(handle: BinaryIO, offset: int, size: int) -> bytes:
    handle.seek(offset)
    return handle.read(size)


class EncodingStatusChecker:
    def __init__(self, gateway: GraphGateway) -> None:
        self._gateway = gateway

    async def get_status(self, video_id: str) -> str:
        payload = await self._gateway.call_json("GET", f"/{video_id}", query={"fields": "status"})
        status = payload.get("status") if isinstance(payload, Mapping) else None
        if not isinstance(status, Mapping) or not status.get("video_status"):
            raise VideoUploadError(
                "Video status response did not include status.video_status",
                code=McpErrorCode.REMOTE_5XX,
                details={"video_id": video_id},
            )
        return str(status["video_status"])

    async def wait_until_ready(self, video_id: str, *, interval: float, timeout: float) -> None:
        """Poll until ``ready``; any state other than ``processing`` is a failure."""

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while True:
            status = await self.get_status(video_id)
            logger.info("video_encoding_status", video_id=video_id, status=status)
            if status != "processing":
                if status == "ready":
                    return
                raise VideoUploadError(
                    f"Video encoding failed with status: {status}",
                    code=McpErrorCode.REMOTE_5XX,
                    details={"video_id": video_id, "status": status},
                )
            if loop.time() >= deadline:
                raise VideoUploadError(
                    f"Video encoding timeout after {timeout:g}s",
                    code=McpErrorCode.REMOTE_5XX,
                    details={"video_id": video_id},
                )
            await asyncio.sleep(interval)


class UploadSession:
    """One upload of one file; not reusable."""

    def __init__(
        self,
        gateway: GraphGateway,
        account_id: str,
        file_path: str | Path,
        *,
        wait_for_encoding: bool = False,
        interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float = DEFAULT_ENCODING_TIMEOUT,
        transient_retry_delay: float | None = None,
    ) -> None:
        self._gateway = gateway
        self.account = ad_account_path(account_id)
        self.path = Path(file_path)
        self.wait_for_encoding = wait_for_encoding
        self.interval = interval
        self.timeout = timeout
        self.transient_retry_delay = (
            get_settings().upload_transient_retry_delay
            if transient_retry_delay is None
            else transient_retry_delay
        )
        self.state = UploadState.IDLE
        self.file_size = 0
        self.session_id = ""
        self.video_id = ""
        self.start_offset = 0
        self.end_offset = 0

    @property
    def title(self) -> str:
        return self.path.name

    async def run(self) -> VideoUploadResult:
        try:
            return await self._run()
        except BaseException:
            self.state = UploadState.FAILED
            raise

    async def _run(self) -> VideoUploadResult:
        try:
            self.file_size = (await asyncio.to_thread(self.path.stat)).st_size
        except OSError as exc:
            raise VideoUploadError(
                f"Failed to get file info: {exc}", details={"file_path": str(self.path)}
            ) from exc

        self._enter(UploadState.STARTING)
        await self._start()

        self._enter(UploadState.TRANSFERRING)
        await self._transfer()

        self._enter(UploadState.FINISHING)
        finish = await self._finish()

        status = None
        if self.wait_for_encoding:
            self._enter(UploadState.ENCODING_WAIT)
            await EncodingStatusChecker(self._gateway).wait_until_ready(
                self.video_id, interval=self.interval, timeout=self.timeout
            )
            status = "ready"

        self._enter(UploadState.DONE)
        extra = {key: value for key, value in finish.items() if key not in ("success", "description")}
        return VideoUploadResult(
            video_id=self.video_id,
            title=self.title,
            description=finish.get("description") or None,
            status=status,
            extra=extra,
        )

    def _enter(self, state: UploadState) -> None:
        self.state = state
        logger.info(
            "video_upload_phase",
            phase=state.value,
            account=self.account,
            video_id=self.video_id or None,
            file=self.title,
        )

    async def _start(self) -> None:
        payload = await self._gateway.call_json(
            "POST",
            f"/{self.account}/advideos",
            form={"upload_phase": "start", "file_size": self.file_size},
        )
        if not isinstance(payload, Mapping):
            raise VideoUploadError("Unexpected start response", code=McpErrorCode.REMOTE_5XX)
        self.session_id = str(payload.get("upload_session_id") or "")
        self.video_id = str(payload.get("video_id") or "")
        self._set_offsets(_offset(payload, "start_offset"), _offset(payload, "end_offset"))
        if not self.session_id or not self.video_id:
            raise VideoUploadError(
                "Start response did not include an upload session and video id",
                code=McpErrorCode.REMOTE_5XX,
                details={"response": dict(payload)},
            )

    async def _transfer(self) -> None:
        budget = retry_budget(self.file_size)
        retries = budget
        with self.path.open("rb") as handle:
            while self.start_offset != self.end_offset:
                size = self.end_offset - self.start_offset
                chunk = await asyncio.to_thread(_read_chunk, handle, self.start_offset, size)
                if len(chunk) != size:
                    raise VideoUploadError(
                        "Failed to read chunk",
                        details={"start_offset": self.start_offset, "expected": size, "read": len(chunk)},
                    )
                try:
                    payload = await self._send_chunk(chunk)
                except GraphApiError as exc:
                    if retries > 0 and exc.error_subcode == OFFSET_DESYNC_SUBCODE:
                        retries -= 1
                        self._resume_from(exc.error_data)
                        logger.warning(
                            "video_chunk_offset_desync",
                            start_offset=self.start_offset,
                            end_offset=self.end_offset,
                            retries_left=retries,
                        )
                        continue
                    if retries > 0 and exc.is_transient:
                        retries -= 1
                        logger.warning("video_chunk_transient_error", retries_left=retries, error=exc.message)
                        await asyncio.sleep(self.transient_retry_delay)
                        continue
                    raise
                self._set_offsets(_offset(payload, "start_offset"), _offset(payload, "end_offset"))
                retries = budget

    async def _send_chunk(self, chunk: bytes) -> Mapping[str, Any]:
        payload = await self._gateway.call_json(
            "POST",
            f"/{self.account}/advideos",
            form={
                "upload_phase": "transfer",
                "start_offset": self.start_offset,
                "upload_session_id": self.session_id,
            },
            files={"video_file_chunk": (self.title, chunk, "application/octet-stream")},
            video=True,
        )
        if not isinstance(payload, Mapping):
            raise VideoUploadError("Unexpected transfer response", code=McpErrorCode.REMOTE_5XX)
        return payload

    def _resume_from(self, error_data: Any) -> None:
        if not isinstance(error_data, Mapping):
            return
        start = self.start_offset
        end = self.end_offset
        if error_data.get("start_offset") is not None:
            start = _offset(error_data, "start_offset")
        if error_data.get("end_offset") is not None:
            end = _offset(error_data, "end_offset")
        self._set_offsets(start, end)

    def _set_offsets(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= self.file_size:
            raise VideoUploadError(
                "Vendor returned offsets outside the file",
                code=McpErrorCode.REMOTE_5XX,
                details={"start_offset": start, "end_offset": end, "file_size": self.file_size},
            )
        self.start_offset = start
        self.end_offset = end

    async def _finish(self) -> dict[str, Any]:
        payload = await self._gateway.call_json(
            "POST",
            f"/{self.account}/advideos",
            form={
                "upload_phase": "finish",
                "upload_session_id": self.session_id,
                "title": self.title,
            },
        )
        if not isinstance(payload, Mapping) or not payload.get("success"):
            raise VideoUploadError(
                "Upload finish failed",
                code=McpErrorCode.REMOTE_5XX,
                details={"video_id": self.video_id},
            )
        return dict(payload)


class VideoUploader:
    """Runs at most one upload session at a time."""

    def __init__(self, gateway: GraphGateway) -> None:
        self._gateway = gateway
        self._session: UploadSession | None = None

    @property
    def active(self) -> bool:
        return self._session is not None

    async def upload(
        self,
        account_id: str,
        file_path: str | Path,
        *,
        wait_for_encoding: bool = False,
        interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float = DEFAULT_ENCODING_TIMEOUT,
    ) -> VideoUploadResult:
        if self._session is not None:
            raise VideoUploadError(
                "There is already an upload session in progress",
                code=McpErrorCode.CONFLICT,
            )
        self._session = UploadSession(
            self._gateway,
            account_id,
            file_path,
            wait_for_encoding=wait_for_encoding,
            interval=interval,
            timeout=timeout,
        )
        try:
            return await self._session.run()
        finally:
            self._session = None


__all__ = [
    "DEFAULT_ENCODING_TIMEOUT",
    "DEFAULT_POLL_INTERVAL",
    "EncodingStatusChecker",
    "MAX_ENCODING_TIMEOUT",
    "MAX_POLL_INTERVAL",
    "MIN_ENCODING_TIMEOUT",
    "MIN_POLL_INTERVAL",
    "OFFSET_DESYNC_SUBCODE",
    "UploadSession",
    "UploadState",
    "VideoUploadError",
    "VideoUploadResult",
    "VideoUploader",
    "ad_account_path",
    "retry_budget",
]
