# ============================================================================
# FILE: app/core/security.py
# ============================================================================
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from starlette.responses import Response
from app.config import settings
import logging

logger = logging.getLogger(__name__)

def session_max_age() -> timedelta:
    return timedelta(days=settings.SESSION_MAX_AGE_DAYS)

def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a session token bound to the internal user id.
    The token is tamper-evident, not encrypted: it only carries the id.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or session_max_age())
    payload = {"sub": str(user_id), "iat": now, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_session_token(token: str) -> Optional[int]:
    """Return the bound user id, or None for a forged, expired or malformed token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.debug("Session token expired")
        return None
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected session token: {e}")
        return None

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        return None

def set_session_cookie(response: Response, user_id: int) -> None:
    """Bind the response's client to user_id for SESSION_MAX_AGE_DAYS"""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user_id),
        max_age=int(session_max_age().total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
