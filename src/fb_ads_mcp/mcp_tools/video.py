"""Video upload meta tools."""

from __future__ import annotations

import asyncio
import time
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..errors import BindingError, MCPException
from ..logging import get_logger
from ..video.uploader import (
    DEFAULT_ENCODING_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    MAX_ENCODING_TIMEOUT,
    MAX_POLL_INTERVAL,
    MIN_ENCODING_TIMEOUT,
    MIN_POLL_INTERVAL,
    EncodingStatusChecker,
    VideoUploader,
)
from .common import ToolEnvironment, failure, success

logger = get_logger(__name__)

MAX_BATCH_VIDEOS = 10

AccountId = Annotated[str, Field(min_length=1, description="Facebook ad account ID (format: act_XXXXXXXXX)")]
WaitForEncoding = Annotated[
    bool,
    Field(description="Wait for video encoding to complete before returning"),
]


def register(server: FastMCP, env: ToolEnvironment) -> None:
    @server.tool(
        name="facebook_video_upload",
        structured_output=True,
        description=(
            "Upload a video to a Facebook ad account using resumable chunked upload. "
            "Optionally waits for encoding to finish."
        ),
    )
    async def facebook_video_upload(
        account_id: AccountId,
        file_path: Annotated[str, Field(min_length=1, description="Local path to the video file")],
        wait_for_encoding: WaitForEncoding = False,
        encoding_timeout_seconds: Annotated[
            float,
            Field(
                ge=MIN_ENCODING_TIMEOUT,
                le=MAX_ENCODING_TIMEOUT,
                description="Maximum time to wait for encoding in seconds",
            ),
        ] = DEFAULT_ENCODING_TIMEOUT,
        polling_interval_seconds: Annotated[
            float,
            Field(
                ge=MIN_POLL_INTERVAL,
                le=MAX_POLL_INTERVAL,
                description="Interval between encoding status checks in seconds",
            ),
        ] = DEFAULT_POLL_INTERVAL,
    ) -> dict[str, Any]:
        started = time.monotonic()
        try:
            result = await VideoUploader(env.gateway).upload(
                account_id,
                file_path,
                wait_for_encoding=wait_for_encoding,
                interval=polling_interval_seconds,
                timeout=encoding_timeout_seconds,
            )
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "facebook_video_upload"})

        data: dict[str, Any] = {
            "success": True,
            "video_id": result.video_id,
            "title": result.title,
            "account_id": account_id,
            "upload_duration_seconds": round(time.monotonic() - started, 3),
            "metadata": result.extra,
        }
        if result.description:
            data["description"] = result.description
        if wait_for_encoding:
            data["status"] = result.status
            data["encoding_complete"] = True
        return success(data)

    @server.tool(
        name="facebook_video_status",
        structured_output=True,
        description="Check the encoding status of an uploaded video.",
    )
    async def facebook_video_status(
        video_id: Annotated[str, Field(min_length=1, description="Video ID to check")],
    ) -> dict[str, Any]:
        try:
            status = await EncodingStatusChecker(env.gateway).get_status(video_id)
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "facebook_video_status"})
        return success({"video_id": video_id, "status": status, "ready": status == "ready"})

    @server.tool(
        name="facebook_video_upload_batch",
        structured_output=True,
        description="Upload multiple videos to a Facebook ad account",
    )
    async def facebook_video_upload_batch(
        account_id: AccountId,
        file_paths: Annotated[
            list[str],
            Field(description=f"Local paths of the video files (max {MAX_BATCH_VIDEOS})"),
        ],
        wait_for_encoding: WaitForEncoding = False,
        parallel: Annotated[
            bool,
            Field(description="Upload the videos concurrently instead of one after another"),
        ] = False,
    ) -> dict[str, Any]:
        try:
            if not file_paths:
                raise BindingError("At least one file path is required")
            if len(file_paths) > MAX_BATCH_VIDEOS:
                raise BindingError(
                    f"Maximum {MAX_BATCH_VIDEOS} videos can be uploaded in a batch",
                    details={"file_paths": len(file_paths)},
                )
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "facebook_video_upload_batch"})

        async def upload_one(uploader: VideoUploader, index: int, path: str) -> dict[str, Any]:
            item: dict[str, Any] = {"index": index, "file_path": path}
            try:
                result = await uploader.upload(account_id, path, wait_for_encoding=wait_for_encoding)
            except MCPException as exc:
                logger.warning("batch_video_upload_failed", index=index, file=path, error=exc.error.message)
                item.update(success=False, error=exc.error.message)
                return item
            item.update(success=True, video_id=result.video_id, title=result.title)
            if result.status:
                item["status"] = result.status
            return item

        if parallel:
            results = list(
                await asyncio.gather(
                    *(
                        upload_one(VideoUploader(env.gateway), index, path)
                        for index, path in enumerate(file_paths)
                    )
                )
            )
        else:
            uploader = VideoUploader(env.gateway)
            results = [await upload_one(uploader, index, path) for index, path in enumerate(file_paths)]

        successful = sum(1 for item in results if item["success"])
        return success(
            {
                "total_videos": len(file_paths),
                "successful": successful,
                "failed": len(results) - successful,
                "account_id": account_id,
                "wait_for_encoding": wait_for_encoding,
                "results": results,
            }
        )


__all__ = ["MAX_BATCH_VIDEOS", "register"]
