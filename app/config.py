# ============================================================================
# FILE: app/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "RhythmCloud Studio"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str = "sqlite:///./rhythmcloud.db"  # Change to PostgreSQL in production
    DB_POOL_TIMEOUT_SECONDS: int = 10

    # Session cookie
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "session"
    SESSION_MAX_AGE_DAYS: int = 30
    SESSION_COOKIE_SECURE: bool = False

    # OAuth (Google)
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_CALLBACK_PATH: str = "/auth/google/callback"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Object storage (S3 compatible)
    STORAGE_ENDPOINT_URL: Optional[str] = None
    STORAGE_ACCESS_KEY_ID: str = ""
    STORAGE_SECRET_ACCESS_KEY: str = ""
    STORAGE_BUCKET_NAME: str = "rhythmcloud"
    STORAGE_REGION: str = "us-east-1"
    STORAGE_PUBLIC_URL: Optional[str] = None
    STORAGE_FOLDER: str = "rhythmcloud-studio"
    STORAGE_TIMEOUT_SECONDS: int = 60

    # Catalog
    ADMIN_EMAIL: str = ""
    DEFAULT_ARTIST: str = "The Rhythmcloud Studio"
    DEFAULT_COVER_URL: str = "https://cdn-icons-png.flaticon.com/512/9043/9043063.png"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Frontend
    STATIC_DIR: str = "public"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
