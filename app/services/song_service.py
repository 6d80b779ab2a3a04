# ============================================================================
# FILE: app/services/song_service.py
# ============================================================================
from typing import BinaryIO, List, Optional
from sqlalchemy.orm import Session
from app.db.models.song import Song
from app.core.storage import ObjectStorageClient
from app.config import settings
import logging

logger = logging.getLogger(__name__)

class SongService:
    """Service layer for the song catalog"""

    def list_songs(self, db: Session) -> List[Song]:
        """All songs, newest first"""
        return db.query(Song).order_by(Song.date.desc(), Song.seq.desc()).all()

    def create_song(self, db: Session, title: Optional[str], url: str) -> Song:
        """Insert a song with the deployment's fixed artist and cover"""
        try:
            song = Song(
                title=title,
                artist=settings.DEFAULT_ARTIST,
                url=url,
                cover=settings.DEFAULT_COVER_URL,
            )
            db.add(song)
            db.commit()
            db.refresh(song)
            logger.info(f"Song created: {song.id} ({song.title})")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise

    def ingest_upload(
        self,
        db: Session,
        storage: ObjectStorageClient,
        title: Optional[str],
        fileobj: BinaryIO,
    ) -> Song:
        """
        Store the audio payload, then record it as a song.
        The song row is only written after storage returned a URL.
        """
        url = storage.upload_audio(fileobj)
        return self.create_song(db, title, url)

# Create singleton instance
song_service = SongService()
