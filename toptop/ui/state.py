"""Client-side interaction state for the video detail page.

The page shows like/follow changes before the server confirms them. Each
interaction dispatches its RPC call as a background task and only touches its
own slice of state when that task finishes, so concurrent interactions need no
coordination. The store stays the source of truth: a failed like or follow
puts the flag back to what it was before that toggle, and a failed like also
refetches the count.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Coroutine, Literal, Protocol

from ..clients import RpcClient, RpcError
from ..schemas import CommentItem, UserSummary, VideoPage
from .formatting import format_number

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = "You need to login"
COMMENT_FAILED_MESSAGE = "Post comment failed"
COPY_SUCCEEDED_MESSAGE = "Copied to clipboard"
COPY_FAILED_MESSAGE = "Failed to copy to clipboard"


@dataclass(frozen=True, slots=True)
class Notice:
    kind: Literal["info", "error"]
    message: str


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class VideoPageState:
    def __init__(
        self,
        page: VideoPage,
        *,
        viewer: UserSummary | None,
        rpc: RpcClient,
        history_length: int = 0,
    ) -> None:
        self.video = page.video
        self.href = page.href
        self.viewer = viewer
        self._rpc = rpc

        self.is_liked = page.video.liked_by_me
        self.is_followed = page.video.followed_by_me
        self.like_count = page.video.like_count
        self.comments: list[CommentItem] = list(page.video.comments)
        self.input_value = ""
        self.is_posting = False
        # More than two history entries means the visitor navigated here from inside the app.
        self.back_visible = history_length > 2
        self.notices: list[Notice] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def follow_visible(self) -> bool:
        return self.viewer is None or self.viewer.id != self.video.user.id

    @property
    def like_count_label(self) -> str:
        return format_number(self.like_count)

    @property
    def can_submit_comment(self) -> bool:
        return not self.is_posting and bool(self.input_value.strip())

    def _notify(self, kind: Literal["info", "error"], message: str) -> None:
        self.notices.append(Notice(kind=kind, message=message))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def settle(self) -> None:
        """Wait for every interaction still in flight."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # Like

    def toggle_like(self) -> asyncio.Task[None] | None:
        if self.viewer is None:
            self._notify("info", LOGIN_REQUIRED_MESSAGE)
            return None
        previous = self.is_liked
        self.is_liked = not previous
        return self._spawn(self._commit_like(target=self.is_liked, previous=previous))

    async def _commit_like(self, *, target: bool, previous: bool) -> None:
        try:
            await self._rpc.toggle_like(self.video.id, is_liked=target)
        except RpcError:
            logger.warning("Like toggle failed for video %s", self.video.id, exc_info=True)
            if self.is_liked == target:
                self.is_liked = previous
        await self._refresh_like_count()

    async def _refresh_like_count(self) -> None:
        try:
            self.like_count = await self._rpc.like_count(self.video.id)
        except RpcError:
            logger.warning("Like count refresh failed for video %s", self.video.id, exc_info=True)

    # Follow

    def toggle_follow(self) -> asyncio.Task[None] | None:
        if self.viewer is None:
            self._notify("info", LOGIN_REQUIRED_MESSAGE)
            return None
        previous = self.is_followed
        self.is_followed = not previous
        return self._spawn(self._commit_follow(target=self.is_followed, previous=previous))

    async def _commit_follow(self, *, target: bool, previous: bool) -> None:
        try:
            await self._rpc.toggle_follow(self.video.user.id, is_followed=target)
        except RpcError:
            logger.warning("Follow toggle failed for user %s", self.video.user.id, exc_info=True)
            if self.is_followed == target:
                self.is_followed = previous

    # Comments

    def submit_comment(self) -> asyncio.Task[None] | None:
        if not self.can_submit_comment:
            return None
        content = self.input_value.strip()
        self.input_value = ""
        self.is_posting = True
        return self._spawn(self._commit_comment(content))

    async def _commit_comment(self, content: str) -> None:
        try:
            await self._rpc.post_comment(self.video.id, content=content)
        except RpcError:
            logger.warning("Posting comment failed for video %s", self.video.id, exc_info=True)
            self._notify("error", COMMENT_FAILED_MESSAGE)
            return
        finally:
            self.is_posting = False

        try:
            self.comments = await self._rpc.comments_by_video(self.video.id)
        except RpcError:
            logger.warning("Comment refresh failed for video %s", self.video.id, exc_info=True)

    # Share link

    async def copy_link(self, clipboard: Clipboard) -> bool:
        try:
            await clipboard.write_text(self.href)
        except Exception:
            logger.info("Clipboard write failed", exc_info=True)
            self._notify("error", COPY_FAILED_MESSAGE)
            return False
        self._notify("info", COPY_SUCCEEDED_MESSAGE)
        return True


__all__ = [
    "COMMENT_FAILED_MESSAGE",
    "COPY_FAILED_MESSAGE",
    "COPY_SUCCEEDED_MESSAGE",
    "LOGIN_REQUIRED_MESSAGE",
    "Clipboard",
    "Notice",
    "VideoPageState",
]
