# ============================================================================
# FILE: app/api/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.endpoints import admin, auth, songs, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(user.router, tags=["user"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

auth_router = APIRouter()
auth_router.include_router(auth.router, prefix="/auth", tags=["auth"])
