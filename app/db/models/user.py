# ============================================================================
# FILE: app/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

class User(Base):
    """User authenticated through Google, created on first login"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    google_id = Column(String, unique=True, index=True, nullable=False)
    display_name = Column(String, nullable=False, default="")
    email = Column(String, index=True, nullable=False)
    photo = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    likes = relationship(
        "LikedSong",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="LikedSong.id",
    )

    @property
    def liked_songs(self):
        """Song ids in the order they were liked"""
        return [like.song_id for like in self.likes]

class LikedSong(Base):
    """Membership row: one per (user, song) pair"""
    __tablename__ = "user_liked_songs"
    __table_args__ = (
        UniqueConstraint("user_id", "song_id", name="uq_user_liked_song"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    song_id = Column(String, nullable=False)  # not a foreign key: likes are not validated
    liked_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="likes")
