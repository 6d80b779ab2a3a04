# ============================================================================
# FILE: app/api/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import Optional
from app.db.session import get_db
from app.api.dependencies import get_oauth_client
from app.core.errors import AuthenticationError
from app.core.oauth import GoogleOAuthClient
from app.core.security import set_session_cookie
from app.services.user_service import user_service
from app.config import settings
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _callback_url(request: Request) -> str:
    return str(request.base_url).rstrip("/") + settings.GOOGLE_CALLBACK_PATH

@router.get("/{provider}")
@router.get("/{provider}/start")
async def start_login(
    request: Request,
    oauth: GoogleOAuthClient = Depends(get_oauth_client)
):
    """
    Redirect to the provider's consent screen
    """
    return RedirectResponse(oauth.authorization_url(_callback_url(request)), status_code=302)

@router.get("/{provider}/callback")
async def login_callback(
    request: Request,
    code: Optional[str] = None,
    error: Optional[str] = None,
    oauth: GoogleOAuthClient = Depends(get_oauth_client),
    db: Session = Depends(get_db)
):
    """
    Finish the OAuth flow: resolve the profile to a user,
    start a session and go back to the frontend
    """
    if error or not code:
        logger.warning(f"Provider {oauth.provider} denied login: {error or 'missing code'}")
        raise AuthenticationError()

    profile = await oauth.fetch_profile(code, _callback_url(request))
    user = await run_in_threadpool(user_service.get_or_create_from_profile, db, profile)

    response = RedirectResponse("/", status_code=302)
    set_session_cookie(response, user.id)
    logger.info(f"User {user.id} logged in via {oauth.provider}")
    return response
