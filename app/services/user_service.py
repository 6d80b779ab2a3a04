# ============================================================================
# FILE: app/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.db.models.user import User, LikedSong
from app.schemas.user import ProviderProfile
from app.core.errors import AuthenticationError
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        """Get user by internal id"""
        return db.get(User, user_id)

    def get_user_by_google_id(self, db: Session, google_id: str) -> Optional[User]:
        """Get user by provider subject id"""
        return db.query(User).filter(User.google_id == google_id).first()

    def get_or_create_from_profile(self, db: Session, profile: ProviderProfile) -> User:
        """
        Resolve a provider profile to a local user, creating it on first login.
        Existing users are returned unchanged (no profile refresh).
        """
        user = self.get_user_by_google_id(db, profile.id)
        if user:
            return user

        if not profile.email:
            raise AuthenticationError("Provider profile has no email")

        user = User(
            google_id=profile.id,
            display_name=profile.display_name,
            email=profile.email,
            photo=profile.photo,
        )
        try:
            db.add(user)
            db.commit()
        except IntegrityError:
            # A concurrent callback created the same google_id first
            db.rollback()
            logger.info(f"User {profile.id} created concurrently, reusing existing record")
            existing = self.get_user_by_google_id(db, profile.id)
            if existing is None:
                raise
            return existing
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

        db.refresh(user)
        logger.info(f"User created: {user.id} ({user.email})")
        return user

    def is_liked(self, db: Session, user_id: int, song_id: str) -> bool:
        return db.query(LikedSong).filter(
            LikedSong.user_id == user_id,
            LikedSong.song_id == song_id,
        ).first() is not None

    def toggle_like(self, db: Session, user_id: int, song_id: str) -> User:
        """
        Flip membership of song_id in the user's liked songs.

        Works on single membership rows (DELETE, else INSERT) instead of
        rewriting the whole set, so toggles on different songs never lose
        each other's updates.
        """
        try:
            result = db.execute(
                delete(LikedSong).where(
                    LikedSong.user_id == user_id,
                    LikedSong.song_id == song_id,
                )
            )
            if result.rowcount:
                logger.info(f"User {user_id} unliked song {song_id}")
            else:
                db.add(LikedSong(user_id=user_id, song_id=song_id))
                logger.info(f"User {user_id} liked song {song_id}")
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if not self.is_liked(db, user_id, song_id):
                # Not the membership constraint (e.g. user row gone)
                logger.error(f"Error toggling like: {e}")
                raise
            # Same song liked concurrently: it is liked either way
            logger.info(f"Song {song_id} already liked by user {user_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error toggling like: {e}")
            raise

        # Re-read so the returned record reflects what is stored
        db.expire_all()
        return self.get_user(db, user_id)

# Create singleton instance
user_service = UserService()
