"""Session provider: resolves the current viewer from a signed access token.

Issuing tokens (sign-up, login) happens elsewhere; this module only validates
them. A token may arrive as an ``Authorization: Bearer`` header or, for the
server-rendered pages, as the ``access_token`` cookie.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_session
from ..models import User

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "access_token"

_security = HTTPBearer(auto_error=False)

_PLACEHOLDER_SECRETS = {"changeme", "change-me", "placeholder", "example", "secret"}


@lru_cache(maxsize=1)
def _get_jwt_secret() -> str:
    secret = (get_settings().jwt_secret_key or "").strip()
    if not secret or secret.lower() in _PLACEHOLDER_SECRETS:
        raise RuntimeError("Environment variable JWT_SECRET_KEY is required and must not use placeholder defaults")
    return secret


def create_access_token(subject: UUID, *, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT holding the provided ``subject``."""

    settings = get_settings()
    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": str(subject), "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Decode and validate a JWT, returning the embedded subject UUID."""

    try:
        payload = jwt.decode(token, _get_jwt_secret(), algorithms=[get_settings().jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        return UUID(subject)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload") from exc


def _extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        return credentials.credentials
    cookie = request.cookies.get(ACCESS_TOKEN_COOKIE)
    return cookie or None


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated user or fail with 401."""

    token = _extract_token(request, credentials)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    user_id = decode_access_token(token)
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return user


async def get_optional_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
) -> User | None:
    """Return the authenticated user when a valid token is provided."""

    token = _extract_token(request, credentials)
    if token is None:
        return None

    try:
        user_id = decode_access_token(token)
    except HTTPException:
        logger.debug("Ignoring invalid access token on optional session lookup")
        return None

    return db.get(User, user_id)


__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
]
