# ============================================================================
# FILE: app/api/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import require_current_user, LOGIN_REQUIRED_MESSAGE
from app.core.errors import AuthorizationError
from app.schemas.song import SongResponse
from app.schemas.user import UserResponse
from app.services.song_service import song_service
from app.services.user_service import user_service
from app.db.models.user import User

router = APIRouter()

@router.get("", response_model=List[SongResponse])
def list_songs(db: Session = Depends(get_db)):
    """
    All songs, newest first
    Available to all users (authenticated and anonymous)
    """
    return song_service.list_songs(db)

@router.post("/{song_id}/like", response_model=UserResponse)
def toggle_like(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Like the song, or unlike it if already liked
    Requires authentication
    """
    user = user_service.toggle_like(db, current_user.id, song_id)
    if user is None:
        # Deleted between session lookup and toggle
        raise AuthorizationError(LOGIN_REQUIRED_MESSAGE, status_code=401)
    return user
