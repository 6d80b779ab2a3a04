# ============================================================================
# FILE: app/api/dependencies.py
# ============================================================================
from fastapi import Depends, Request
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import decode_session_token
from app.core.errors import AuthorizationError, UnknownProviderError
from app.core.oauth import GoogleOAuthClient
from app.core.storage import ObjectStorageClient
from app.db.models.user import User
from app.services.user_service import user_service
from app.config import settings
from typing import Optional

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

ADMIN_DENIED_MESSAGE = "Access Denied: Only The RhythmCloud Admin can upload."
LOGIN_REQUIRED_MESSAGE = "Login required"

def get_current_user(
    token: Optional[str] = Depends(session_cookie),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the session cookie to a user.
    Returns None if there is no cookie, the signature does not verify,
    it expired, or the bound user no longer exists.
    """
    if not token:
        return None

    user_id = decode_session_token(token)
    if user_id is None:
        return None

    return user_service.get_user(db, user_id)

def require_current_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise AuthorizationError(LOGIN_REQUIRED_MESSAGE, status_code=401)
    return current_user

def require_admin(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Only the configured ADMIN_EMAIL may pass (403 otherwise)"""
    if (
        current_user is None
        or not settings.ADMIN_EMAIL
        or current_user.email != settings.ADMIN_EMAIL
    ):
        raise AuthorizationError(ADMIN_DENIED_MESSAGE, status_code=403)
    return current_user

def get_storage(request: Request) -> ObjectStorageClient:
    """Process-wide storage client created at startup"""
    return request.app.state.storage

def get_oauth_client(provider: str, request: Request) -> GoogleOAuthClient:
    """OAuth client for the {provider} path segment"""
    clients = request.app.state.oauth_clients
    if provider not in clients:
        raise UnknownProviderError(provider)
    return clients[provider]
