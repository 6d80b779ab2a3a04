# ============================================================================
# FILE: app/schemas/user.py
# ============================================================================
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List

class ProviderProfile(BaseModel):
    """Identity returned by the OAuth provider"""
    id: str
    display_name: str = ""
    emails: List[str] = []
    photos: List[str] = []

    @property
    def email(self) -> str:
        """First email is the canonical one"""
        return self.emails[0] if self.emails else ""

    @property
    def photo(self) -> str:
        return self.photos[0] if self.photos else ""

class UserResponse(BaseModel):
    """Schema for user response (camelCase keys for the frontend)"""
    id: int
    google_id: str
    display_name: str = ""
    email: str
    photo: str = ""
    liked_songs: List[str] = []

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
