"""Tests for the optimistic interaction state of the video detail page."""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from uuid import UUID, uuid4

from toptop.clients import RpcError
from toptop.schemas import CommentItem, UserSummary, VideoDetail, VideoPage
from toptop.ui.state import (
    COMMENT_FAILED_MESSAGE,
    COPY_FAILED_MESSAGE,
    COPY_SUCCEEDED_MESSAGE,
    LOGIN_REQUIRED_MESSAGE,
    VideoPageState,
)

AUTHOR = UserSummary(id=uuid4(), name="Author", image="https://cdn.example.com/a.png")
VIEWER = UserSummary(id=uuid4(), name="Viewer", image="https://cdn.example.com/b.png")


class FakeRpc:
    """Records calls and lets a test hold or fail each procedure."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.fail: set[str] = set()
        self.gate: asyncio.Event | None = None
        self.like_total = 7
        self.comments: list[CommentItem] = []

    async def _enter(self, procedure: str, argument: object) -> None:
        self.calls.append((procedure, argument))
        if self.gate is not None:
            await self.gate.wait()
        if procedure in self.fail:
            raise RpcError(procedure, "boom", status_code=500)

    async def like_count(self, video_id: UUID) -> int:
        await self._enter("like.count", video_id)
        return self.like_total

    async def toggle_like(self, video_id: UUID, *, is_liked: bool) -> int:
        await self._enter("like.toggle", is_liked)
        self.like_total += 1 if is_liked else -1
        return self.like_total

    async def toggle_follow(self, following_id: UUID, *, is_followed: bool) -> None:
        await self._enter("follow.toggle", is_followed)

    async def comments_by_video(self, video_id: UUID) -> list[CommentItem]:
        await self._enter("comment.by-video", video_id)
        return list(self.comments)

    async def post_comment(self, video_id: UUID, *, content: str) -> CommentItem:
        await self._enter("comment.post", content)
        item = CommentItem(id=uuid4(), content=content, created_at=datetime.now(timezone.utc), user=VIEWER)
        self.comments.insert(0, item)
        return item


class FakeClipboard:
    def __init__(self, *, broken: bool = False) -> None:
        self.broken = broken
        self.text: str | None = None

    async def write_text(self, text: str) -> None:
        if self.broken:
            raise PermissionError("clipboard unavailable")
        self.text = text


def _page(*, liked: bool = False, followed: bool = False, like_count: int = 7) -> VideoPage:
    video = VideoDetail(
        id=uuid4(),
        video_url="https://cdn.example.com/v.mp4",
        cover_url="https://cdn.example.com/v.jpg",
        caption="clip",
        like_count=like_count,
        user=AUTHOR,
        liked_by_me=liked,
        followed_by_me=followed,
    )
    return VideoPage(video=video, origin="https://toptop.fly.dev", href=f"https://toptop.fly.dev/video/{video.id}")


def test_signed_out_like_prompts_login_without_calling_rpc() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        state = VideoPageState(_page(), viewer=None, rpc=rpc)

        assert state.toggle_like() is None
        assert state.toggle_follow() is None
        await state.settle()

        assert rpc.calls == []
        assert state.is_liked is False
        assert state.is_followed is False
        assert [notice.message for notice in state.notices] == [LOGIN_REQUIRED_MESSAGE, LOGIN_REQUIRED_MESSAGE]

    asyncio.run(scenario())


def test_like_flips_immediately_then_refreshes_count() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        rpc.gate = asyncio.Event()
        state = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)

        state.toggle_like()
        assert state.is_liked is True
        assert state.like_count == 7

        rpc.gate.set()
        await state.settle()
        assert [call[0] for call in rpc.calls] == ["like.toggle", "like.count"]
        assert rpc.calls[0][1] is True
        assert state.is_liked is True
        assert state.like_count == 8

    asyncio.run(scenario())


def test_failed_like_reverts_flag_and_refetches_count() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        rpc.fail.add("like.toggle")
        state = VideoPageState(_page(liked=True), viewer=VIEWER, rpc=rpc)

        state.toggle_like()
        assert state.is_liked is False
        await state.settle()

        assert state.is_liked is True
        assert state.like_count == 7
        assert ("like.count", state.video.id) in rpc.calls

    asyncio.run(scenario())


def test_failed_follow_reverts_flag() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        rpc.fail.add("follow.toggle")
        state = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)

        state.toggle_follow()
        assert state.is_followed is True
        await state.settle()

        assert state.is_followed is False
        assert rpc.calls == [("follow.toggle", True)]

    asyncio.run(scenario())


def test_follow_hidden_on_own_video() -> None:
    rpc = FakeRpc()
    author_view = VideoPageState(_page(), viewer=AUTHOR, rpc=rpc)
    visitor_view = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)
    signed_out_view = VideoPageState(_page(), viewer=None, rpc=rpc)

    assert author_view.follow_visible is False
    assert visitor_view.follow_visible is True
    assert signed_out_view.follow_visible is True


def test_whitespace_comment_is_ignored() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        state = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)
        state.input_value = "   \n"

        assert state.can_submit_comment is False
        assert state.submit_comment() is None
        await state.settle()

        assert rpc.calls == []
        assert state.input_value == "   \n"
        assert state.is_posting is False

    asyncio.run(scenario())


def test_comment_submit_clears_input_and_refreshes_list() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        rpc.gate = asyncio.Event()
        state = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)
        state.input_value = "  love it  "

        state.submit_comment()
        assert state.input_value == ""
        assert state.is_posting is True

        # A second submit while the first is in flight is dropped.
        state.input_value = "again"
        assert state.submit_comment() is None

        rpc.gate.set()
        await state.settle()

        assert state.is_posting is False
        assert [call[0] for call in rpc.calls] == ["comment.post", "comment.by-video"]
        assert rpc.calls[0][1] == "love it"
        assert [comment.content for comment in state.comments] == ["love it"]

    asyncio.run(scenario())


def test_failed_comment_shows_error_and_leaves_input_cleared() -> None:
    async def scenario() -> None:
        rpc = FakeRpc()
        rpc.fail.add("comment.post")
        state = VideoPageState(_page(), viewer=VIEWER, rpc=rpc)
        state.input_value = "hello"

        state.submit_comment()
        await state.settle()

        assert state.is_posting is False
        assert state.input_value == ""
        assert state.notices[-1].kind == "error"
        assert state.notices[-1].message == COMMENT_FAILED_MESSAGE
        assert [call[0] for call in rpc.calls] == ["comment.post"]

    asyncio.run(scenario())


def test_copy_link_reports_outcome() -> None:
    async def scenario() -> None:
        state = VideoPageState(_page(), viewer=None, rpc=FakeRpc())

        clipboard = FakeClipboard()
        assert await state.copy_link(clipboard) is True
        assert clipboard.text == state.href
        assert state.notices[-1].message == COPY_SUCCEEDED_MESSAGE

        assert await state.copy_link(FakeClipboard(broken=True)) is False
        assert state.notices[-1].message == COPY_FAILED_MESSAGE

    asyncio.run(scenario())


def test_back_button_needs_in_app_history() -> None:
    rpc = FakeRpc()
    assert VideoPageState(_page(), viewer=None, rpc=rpc, history_length=3).back_visible is True
    assert VideoPageState(_page(), viewer=None, rpc=rpc, history_length=2).back_visible is False
    assert VideoPageState(_page(), viewer=None, rpc=rpc).back_visible is False


def test_like_count_label_is_compact() -> None:
    state = VideoPageState(_page(like_count=15_300), viewer=None, rpc=FakeRpc())
    assert state.like_count_label == "15K"
