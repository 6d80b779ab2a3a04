# ============================================================================
# FILE: app/api/endpoints/admin.py
# ============================================================================
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import Optional, Union
from app.db.session import get_db
from app.api.dependencies import require_admin, get_storage
from app.core.storage import ObjectStorageClient
from app.services.song_service import song_service
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/upload")
async def upload_song(
    admin: User = Depends(require_admin),
    title: Optional[str] = Form(None),
    song: Union[UploadFile, str, None] = File(None),
    storage: ObjectStorageClient = Depends(get_storage),
    db: Session = Depends(get_db)
):
    """
    Upload an audio file to object storage and add it to the catalog
    Admin only
    """
    # A plain text part named "song" counts as no file
    if not isinstance(song, UploadFile) or not song.filename:
        return PlainTextResponse("No file uploaded")

    new_song = await run_in_threadpool(song_service.ingest_upload, db, storage, title, song.file)
    logger.info(f"Admin {admin.email} uploaded song {new_song.id}")
    return RedirectResponse("/", status_code=302)
