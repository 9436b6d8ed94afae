from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from unittest.mock import MagicMock
from urllib.parse import parse_qs

import httpx
import pytest

from fb_ads_mcp.errors import GraphApiError, McpErrorCode
from fb_ads_mcp.video import EncodingStatusChecker, UploadSession, UploadState, VideoUploadError, VideoUploader
from fb_ads_mcp.video.uploader import ad_account_path, retry_budget

ADVIDEOS_URL = "https://example.com/v23.0/act_123/advideos"
TRANSFER_URL = "https://video.example.com/v23.0/act_123/advideos"
STATUS_URL = "https://example.com/v23.0/v1"
CONTENT = b"0123456789"


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    path = tmp_path / "spring.mp4"
    path.write_bytes(CONTENT)
    return path


def form(request: httpx.Request) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def multipart_field(request: httpx.Request, name: str) -> str:
    match = re.search(rb'name="' + name.encode() + rb'"\r\n\r\n([^\r]*)\r\n', request.content)
    assert match is not None
    return match.group(1).decode()


def offsets(start: int, end: int) -> httpx.Response:
    return httpx.Response(200, json={"start_offset": str(start), "end_offset": str(end)})


def desync(start: int, end: int) -> httpx.Response:
    return httpx.Response(
        400,
        json={
            "error": {
                "message": "Offsets mismatch",
                "code": 6001,
                "error_subcode": 1363037,
                "error_data": json.dumps({"start_offset": str(start), "end_offset": str(end)}),
            }
        },
    )


def mock_start_finish(respx_mock, *, start_end: int = 4, finish: dict | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if form(request)["upload_phase"] == "start":
            return httpx.Response(
                200,
                json={
                    "upload_session_id": "s1",
                    "video_id": "v1",
                    "start_offset": "0",
                    "end_offset": str(start_end),
                },
            )
        return httpx.Response(200, json=finish if finish is not None else {"success": True})

    return respx_mock.post(ADVIDEOS_URL).mock(side_effect=handler)


def test_retry_budget_and_account_path() -> None:
    assert retry_budget(0) == 2
    assert retry_budget(10 * 1024 * 1024 * 5) == 5
    assert ad_account_path("123") == "act_123"
    assert ad_account_path("act_123") == "act_123"


async def test_happy_path_uploads_every_chunk(gateway, respx_mock, video_file: Path) -> None:
    phases = mock_start_finish(respx_mock, finish={"success": True, "description": "Spring promo", "extra": 1})
    transfer = respx_mock.post(TRANSFER_URL).mock(side_effect=[offsets(4, 8), offsets(8, 10), offsets(10, 10)])

    result = await VideoUploader(gateway).upload("123", video_file)

    assert result.video_id == "v1"
    assert result.title == "spring.mp4"
    assert result.description == "Spring promo"
    assert result.status is None
    assert result.extra == {"extra": 1}

    start, finish = (form(call.request) for call in phases.calls)
    assert start == {"upload_phase": "start", "file_size": "10", "access_token": "test-token"}
    assert finish == {
        "upload_phase": "finish",
        "upload_session_id": "s1",
        "title": "spring.mp4",
        "access_token": "test-token",
    }

    assert [multipart_field(call.request, "start_offset") for call in transfer.calls] == ["0", "4", "8"]
    assert [multipart_field(call.request, "upload_session_id") for call in transfer.calls] == ["s1"] * 3
    assert b"0123" in transfer.calls[0].request.content
    assert b"4567" in transfer.calls[1].request.content
    assert b'filename="spring.mp4"' in transfer.calls[2].request.content


async def test_offset_desync_resumes_from_vendor_offsets(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock)
    transfer = respx_mock.post(TRANSFER_URL).mock(side_effect=[desync(4, 10), offsets(10, 10)])

    result = await VideoUploader(gateway).upload("act_123", video_file)

    assert result.video_id == "v1"
    assert [multipart_field(call.request, "start_offset") for call in transfer.calls] == ["0", "4"]
    assert b"456789" in transfer.calls[1].request.content


async def test_retry_budget_exhaustion_fails_the_session(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock)
    transfer = respx_mock.post(TRANSFER_URL).mock(return_value=desync(0, 4))
    session = UploadSession(gateway, "123", video_file)

    with pytest.raises(GraphApiError) as exc:
        await session.run()

    assert exc.value.error_subcode == 1363037
    assert transfer.call_count == retry_budget(len(CONTENT)) + 1
    assert session.state == UploadState.FAILED


async def test_transient_errors_are_retried(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock, start_end=10)
    transient = httpx.Response(500, json={"error": {"message": "Temporary", "code": 1, "is_transient": True}})
    transfer = respx_mock.post(TRANSFER_URL).mock(side_effect=[transient, offsets(10, 10)])

    result = await VideoUploader(gateway).upload("123", video_file)

    assert result.video_id == "v1"
    assert transfer.call_count == 2


async def test_non_transient_error_is_raised(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock, start_end=10)
    transfer = respx_mock.post(TRANSFER_URL).mock(
        return_value=httpx.Response(400, json={"error": {"message": "Bad chunk", "code": 100}})
    )

    with pytest.raises(GraphApiError):
        await VideoUploader(gateway).upload("123", video_file)

    assert transfer.call_count == 1


async def test_wait_for_encoding(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock, start_end=10)
    respx_mock.post(TRANSFER_URL).mock(return_value=offsets(10, 10))
    status = respx_mock.get(STATUS_URL).mock(
        side_effect=[
            httpx.Response(200, json={"status": {"video_status": "processing"}}),
            httpx.Response(200, json={"status": {"video_status": "ready"}}),
        ]
    )

    result = await VideoUploader(gateway).upload("123", video_file, wait_for_encoding=True, interval=0)

    assert result.status == "ready"
    assert status.call_count == 2
    assert status.calls.last.request.url.params["fields"] == "status"


async def test_encoding_failure_status(gateway, respx_mock) -> None:
    respx_mock.get(STATUS_URL).mock(return_value=httpx.Response(200, json={"status": {"video_status": "error"}}))

    with pytest.raises(VideoUploadError) as exc:
        await EncodingStatusChecker(gateway).wait_until_ready("v1", interval=0, timeout=30)

    assert str(exc.value) == "Video encoding failed with status: error"


async def test_encoding_timeout(gateway, respx_mock) -> None:
    respx_mock.get(STATUS_URL).mock(
        return_value=httpx.Response(200, json={"status": {"video_status": "processing"}})
    )

    with pytest.raises(VideoUploadError) as exc:
        await EncodingStatusChecker(gateway).wait_until_ready("v1", interval=0, timeout=0)

    assert str(exc.value) == "Video encoding timeout after 0s"


async def test_status_without_video_status(gateway, respx_mock) -> None:
    respx_mock.get(STATUS_URL).mock(return_value=httpx.Response(200, json={"id": "v1"}))

    with pytest.raises(VideoUploadError):
        await EncodingStatusChecker(gateway).get_status("v1")


async def test_missing_file_fails_before_any_request(gateway, respx_mock, tmp_path: Path) -> None:
    with pytest.raises(VideoUploadError) as exc:
        await VideoUploader(gateway).upload("123", tmp_path / "missing.mp4")

    assert str(exc.value).startswith("Failed to get file info")
    assert not respx_mock.calls


async def test_finish_without_success(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock, start_end=10, finish={"success": False})
    respx_mock.post(TRANSFER_URL).mock(return_value=offsets(10, 10))

    with pytest.raises(VideoUploadError) as exc:
        await VideoUploader(gateway).upload("123", video_file)

    assert str(exc.value) == "Upload finish failed"


async def test_offsets_outside_the_file_are_rejected(gateway, respx_mock, video_file: Path) -> None:
    mock_start_finish(respx_mock, start_end=100)

    with pytest.raises(VideoUploadError) as exc:
        await VideoUploader(gateway).upload("123", video_file)

    assert exc.value.error.code == McpErrorCode.REMOTE_5XX


async def test_one_session_per_uploader(gateway, respx_mock, video_file: Path) -> None:
    uploader = VideoUploader(gateway)
    uploader._session = MagicMock()

    with pytest.raises(VideoUploadError) as exc:
        await uploader.upload("123", video_file)

    assert exc.value.error.code == McpErrorCode.CONFLICT
    assert not respx_mock.calls


async def test_uploader_is_reusable_after_failure(gateway, respx_mock, video_file: Path, tmp_path: Path) -> None:
    uploader = VideoUploader(gateway)
    with pytest.raises(VideoUploadError):
        await uploader.upload("123", tmp_path / "missing.mp4")
    assert uploader.active is False

    mock_start_finish(respx_mock, start_end=10)
    respx_mock.post(TRANSFER_URL).mock(return_value=offsets(10, 10))
    assert (await uploader.upload("123", video_file)).video_id == "v1"


async def test_file_io_runs_in_worker_threads(gateway, respx_mock, video_file: Path, monkeypatch) -> None:
    mock_start_finish(respx_mock, start_end=10)
    respx_mock.post(TRANSFER_URL).mock(return_value=offsets(10, 10))
    offloaded: list[str] = []
    to_thread = asyncio.to_thread

    async def recording_to_thread(func, *args, **kwargs):
        offloaded.append(func.__name__)
        return await to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)

    await VideoUploader(gateway).upload("123", video_file)

    assert offloaded == ["stat", "_read_chunk"]
