# ============================================================================
# FILE: app/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from uuid import uuid4
from app.db.base import Base

def _new_song_id() -> str:
    return uuid4().hex

class Song(Base):
    """Track uploaded by the admin; never updated afterwards"""
    __tablename__ = "songs"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # insertion order, breaks date ties
    id = Column(String(32), unique=True, index=True, nullable=False, default=_new_song_id)
    title = Column(String, nullable=True)
    artist = Column(String, nullable=False)
    url = Column(String, nullable=False)  # Object storage reference
    cover = Column(String, nullable=False)
    date = Column(DateTime, default=datetime.utcnow, index=True, nullable=False)
