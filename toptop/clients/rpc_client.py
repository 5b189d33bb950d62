from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

import httpx
from pydantic import ValidationError

from ..config import get_settings
from ..schemas import CommentItem, LikeCountResponse, LikeToggleResponse, VideoPage

logger = logging.getLogger(__name__)

RPC_PREFIX = "/api/rpc"


class RpcError(RuntimeError):
    """Raised when an RPC procedure cannot be reached or rejects the call."""

    def __init__(self, procedure: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{procedure}: {message}")
        self.procedure = procedure
        self.status_code = status_code


class RpcClient:
    """Typed async client for the video page procedures.

    The viewer's access token, when given, is sent as a bearer token on every
    call. Pass ``transport`` to route calls somewhere other than the network
    (for example ``httpx.ASGITransport`` in tests).
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if base_url is None or timeout is None:
            settings = get_settings()
            base_url = base_url or settings.rpc_base_url
            timeout = settings.rpc_timeout if timeout is None else timeout
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(
        self,
        procedure: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        return await self._send(procedure, f"{RPC_PREFIX}/{procedure}", params=params, payload=payload)

    async def _send(
        self,
        procedure: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        try:
            if payload is None:
                response = await self._client.get(url, params=params)
            else:
                response = await self._client.post(url, json=payload)
        except httpx.HTTPError as exc:
            logger.warning("RPC %s transport failure: %s", procedure, exc)
            raise RpcError(procedure, "transport failure") from exc

        if response.is_error:
            detail: Any = response.text
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get("detail", detail)
            raise RpcError(procedure, str(detail), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise RpcError(procedure, "invalid JSON response", status_code=response.status_code) from exc

    async def video_page(self, video_id: UUID | str) -> VideoPage:
        """Fetch the detail page view model as seen by this client's viewer."""

        data = await self._send("video.page", f"/api/videos/{video_id}")
        try:
            return VideoPage.model_validate(data)
        except ValidationError as exc:
            raise RpcError("video.page", "malformed response") from exc

    async def like_count(self, video_id: UUID) -> int:
        data = await self._call("like.count", params={"videoId": str(video_id)})
        try:
            return LikeCountResponse.model_validate(data).count
        except ValidationError as exc:
            raise RpcError("like.count", "malformed response") from exc

    async def toggle_like(self, video_id: UUID, *, is_liked: bool) -> int:
        data = await self._call("like.toggle", payload={"videoId": str(video_id), "isLiked": is_liked})
        try:
            return LikeToggleResponse.model_validate(data).count
        except ValidationError as exc:
            raise RpcError("like.toggle", "malformed response") from exc

    async def toggle_follow(self, following_id: UUID, *, is_followed: bool) -> None:
        await self._call("follow.toggle", payload={"followingId": str(following_id), "isFollowed": is_followed})

    async def comments_by_video(self, video_id: UUID) -> list[CommentItem]:
        data = await self._call("comment.by-video", params={"videoID": str(video_id)})
        try:
            return [CommentItem.model_validate(item) for item in data]
        except (TypeError, ValidationError) as exc:
            raise RpcError("comment.by-video", "malformed response") from exc

    async def post_comment(self, video_id: UUID, *, content: str) -> CommentItem:
        data = await self._call("comment.post", payload={"videoId": str(video_id), "content": content})
        try:
            return CommentItem.model_validate(data)
        except ValidationError as exc:
            raise RpcError("comment.post", "malformed response") from exc


__all__ = ["RPC_PREFIX", "RpcClient", "RpcError"]
