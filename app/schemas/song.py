# ============================================================================
# FILE: app/schemas/song.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class SongResponse(BaseModel):
    """Schema for song response"""
    id: str
    title: Optional[str] = None
    artist: str
    url: str
    cover: str
    date: datetime

    class Config:
        from_attributes = True
