# ============================================================================
# FILE: app/api/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from app.api.dependencies import get_current_user
from app.core.security import clear_session_cookie
from app.schemas.user import UserResponse
from app.db.models.user import User
from typing import Optional

router = APIRouter()

@router.get("/current_user", response_model=Optional[UserResponse])
def read_current_user(
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Current user, or null when not logged in
    """
    return current_user

@router.get("/logout")
def logout():
    """
    Drop the session cookie and go back to the frontend
    """
    response = RedirectResponse("/", status_code=302)
    clear_session_cookie(response)
    return response
