# ============================================================================
# FILE: app/db/session.py
# ============================================================================
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
import logging

logger = logging.getLogger(__name__)

def build_engine(url: str):
    """Create the process-wide engine for the configured database"""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_timeout=settings.DB_POOL_TIMEOUT_SECONDS,
    )

engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    """Create tables (unique constraints included) if they do not exist"""
    from app.db.base import Base
    from app.db.models import song, user  # noqa: F401  register tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

def close_db():
    engine.dispose()
    logger.info("Database connections closed")

def get_db():
    """FastAPI dependency yielding one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
