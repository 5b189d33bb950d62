"""Integration tests for the like, follow and comment RPC procedures."""
from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete, func, select

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_toptop.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from toptop.database import Base, SessionLocal, engine  # noqa: E402
from toptop.main import app  # noqa: E402
from toptop.models import Comment, Follow, Like, User, Video  # noqa: E402
from toptop.schemas import COMMENT_MAX_LENGTH  # noqa: E402
from toptop.services import create_access_token, get_current_user  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    with SessionLocal() as session:
        for model in (Comment, Like, Follow, Video, User):
            session.execute(delete(model))
        session.commit()
    yield


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def authed_client(client: TestClient) -> Callable[[User], TestClient]:
    def _with_user(user: User) -> TestClient:
        app.dependency_overrides[get_current_user] = lambda: user
        return client

    return _with_user


def _create_user(name: str) -> User:
    with SessionLocal() as session:
        user = User(name=name, email=f"{uuid4().hex}@example.com")
        session.add(user)
        session.commit()
        session.refresh(user)
        return user


def _create_video(author: User) -> Video:
    with SessionLocal() as session:
        video = Video(
            user_id=author.id,
            caption="clip",
            video_url="https://cdn.example.com/v.mp4",
            cover_url="https://cdn.example.com/v.jpg",
        )
        session.add(video)
        session.commit()
        session.refresh(video)
        return video


def _row_count(model, **filters) -> int:
    with SessionLocal() as session:
        stmt = select(func.count()).select_from(model).filter_by(**filters)
        return int(session.scalar(stmt) or 0)


def test_like_count_for_unknown_video_is_not_found(client: TestClient) -> None:
    response = client.get("/api/rpc/like.count", params={"videoId": str(uuid4())})
    assert response.status_code == 404


def test_like_toggle_is_idempotent(authed_client) -> None:
    author = _create_user("Author")
    fan = _create_user("Fan")
    video = _create_video(author)
    client = authed_client(fan)

    for _ in range(2):
        response = client.post("/api/rpc/like.toggle", json={"videoId": str(video.id), "isLiked": True})
        assert response.status_code == 200
        assert response.json() == {"videoId": str(video.id), "isLiked": True, "count": 1}
    assert _row_count(Like, video_id=video.id) == 1

    for _ in range(2):
        response = client.post("/api/rpc/like.toggle", json={"videoId": str(video.id), "isLiked": False})
        assert response.status_code == 200
        assert response.json()["count"] == 0
    assert _row_count(Like, video_id=video.id) == 0

    assert client.get("/api/rpc/like.count", params={"videoId": str(video.id)}).json() == {"count": 0}


def test_like_toggle_requires_session(client: TestClient) -> None:
    author = _create_user("Author")
    video = _create_video(author)

    response = client.post("/api/rpc/like.toggle", json={"videoId": str(video.id), "isLiked": True})
    assert response.status_code == 401
    assert _row_count(Like) == 0


def test_like_toggle_with_access_token_cookie(client: TestClient) -> None:
    author = _create_user("Author")
    fan = _create_user("Fan")
    video = _create_video(author)

    client.cookies.set("access_token", create_access_token(fan.id))
    response = client.post("/api/rpc/like.toggle", json={"videoId": str(video.id), "isLiked": True})
    client.cookies.clear()

    assert response.status_code == 200
    assert _row_count(Like, user_id=fan.id, video_id=video.id) == 1


def test_like_toggle_unknown_video(authed_client) -> None:
    fan = _create_user("Fan")
    response = authed_client(fan).post("/api/rpc/like.toggle", json={"videoId": str(uuid4()), "isLiked": True})
    assert response.status_code == 404


def test_follow_toggle_is_idempotent(authed_client) -> None:
    author = _create_user("Author")
    fan = _create_user("Fan")
    client = authed_client(fan)

    for _ in range(2):
        response = client.post("/api/rpc/follow.toggle", json={"followingId": str(author.id), "isFollowed": True})
        assert response.status_code == 200
        assert response.json() == {"followingId": str(author.id), "isFollowed": True}
    assert _row_count(Follow, follower_id=fan.id, following_id=author.id) == 1

    response = client.post("/api/rpc/follow.toggle", json={"followingId": str(author.id), "isFollowed": False})
    assert response.status_code == 200
    assert _row_count(Follow) == 0


def test_follow_toggle_requires_session(client: TestClient) -> None:
    author = _create_user("Author")
    response = client.post("/api/rpc/follow.toggle", json={"followingId": str(author.id), "isFollowed": True})
    assert response.status_code == 401


def test_cannot_follow_self(authed_client) -> None:
    user = _create_user("Solo")
    response = authed_client(user).post(
        "/api/rpc/follow.toggle", json={"followingId": str(user.id), "isFollowed": True}
    )
    assert response.status_code == 400
    assert _row_count(Follow) == 0


def test_follow_unknown_user(authed_client) -> None:
    fan = _create_user("Fan")
    response = authed_client(fan).post(
        "/api/rpc/follow.toggle", json={"followingId": str(uuid4()), "isFollowed": True}
    )
    assert response.status_code == 404


def test_post_comment_trims_and_returns_item(authed_client) -> None:
    author = _create_user("Author")
    fan = _create_user("Fan")
    video = _create_video(author)

    response = authed_client(fan).post(
        "/api/rpc/comment.post", json={"videoId": str(video.id), "content": "  nice one  "}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["content"] == "nice one"
    assert body["user"]["id"] == str(fan.id)
    assert _row_count(Comment, video_id=video.id) == 1


@pytest.mark.parametrize("content", ["", "   \n\t "])
def test_post_blank_comment_is_rejected(authed_client, content: str) -> None:
    author = _create_user("Author")
    video = _create_video(author)

    response = authed_client(author).post("/api/rpc/comment.post", json={"videoId": str(video.id), "content": content})
    assert response.status_code == 422
    assert _row_count(Comment) == 0


def test_post_overlong_comment_is_rejected(authed_client) -> None:
    author = _create_user("Author")
    video = _create_video(author)

    response = authed_client(author).post(
        "/api/rpc/comment.post",
        json={"videoId": str(video.id), "content": "x" * (COMMENT_MAX_LENGTH + 1)},
    )
    assert response.status_code == 422


def test_comment_length_is_checked_after_trimming(authed_client) -> None:
    author = _create_user("Author")
    video = _create_video(author)

    response = authed_client(author).post(
        "/api/rpc/comment.post",
        json={"videoId": str(video.id), "content": "hi" + " " * (COMMENT_MAX_LENGTH + 100)},
    )
    assert response.status_code == 201
    assert response.json()["content"] == "hi"


def test_back_to_back_comments_list_newest_first(authed_client) -> None:
    author = _create_user("Author")
    video = _create_video(author)
    client = authed_client(author)

    for round_number in range(10):
        for content in (f"old{round_number}", f"new{round_number}"):
            response = client.post("/api/rpc/comment.post", json={"videoId": str(video.id), "content": content})
            assert response.status_code == 201

        listed = client.get("/api/rpc/comment.by-video", params={"videoID": str(video.id)}).json()
        assert [item["content"] for item in listed[:2]] == [f"new{round_number}", f"old{round_number}"]


def test_post_comment_requires_session(client: TestClient) -> None:
    author = _create_user("Author")
    video = _create_video(author)

    response = client.post("/api/rpc/comment.post", json={"videoId": str(video.id), "content": "hi"})
    assert response.status_code == 401


def test_comments_by_video_newest_first(client: TestClient) -> None:
    author = _create_user("Author")
    video = _create_video(author)
    base = datetime(2022, 3, 5, tzinfo=timezone.utc)
    with SessionLocal() as session:
        for minutes, content in ((1, "T1"), (3, "T3"), (2, "T2")):
            session.add(
                Comment(
                    video_id=video.id,
                    user_id=author.id,
                    content=content,
                    created_at=base + timedelta(minutes=minutes),
                )
            )
        session.commit()

    response = client.get("/api/rpc/comment.by-video", params={"videoID": str(video.id)})
    assert response.status_code == 200
    assert [item["content"] for item in response.json()] == ["T3", "T2", "T1"]


def test_comments_by_video_rejects_malformed_id(client: TestClient) -> None:
    response = client.get("/api/rpc/comment.by-video", params={"videoID": "nope"})
    assert response.status_code == 422
