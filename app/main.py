# ============================================================================
# FILE: app/main.py (Serves API + static frontend)
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from app.api.router import api_router, auth_router
from app.core.errors import RhythmCloudError
from app.core.logging import setup_logging
from app.core.oauth import GoogleOAuthClient
from app.core.storage import ObjectStorageClient
from app.config import settings
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="RhythmCloud Studio API",
    description="Music catalog with Google login, admin uploads and likes",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RhythmCloudError)
async def rhythmcloud_error_handler(request: Request, exc: RhythmCloudError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Internal Server Error", status_code=500)

# Routers
app.include_router(auth_router)
app.include_router(api_router, prefix="/api")

@app.on_event("startup")
async def startup_event():
    """Initialize process-wide clients on startup"""
    logger.info("Starting RhythmCloud Studio API")
    from app.db.session import init_db
    init_db()
    app.state.storage = ObjectStorageClient()
    app.state.oauth_clients = {GoogleOAuthClient.provider: GoogleOAuthClient()}

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down RhythmCloud Studio API")
    from app.db.session import close_db
    storage = getattr(app.state, "storage", None)
    if storage is not None:
        storage.close()
    close_db()

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def serve_frontend():
    """Serve the frontend HTML file"""
    frontend_file = os.path.join(settings.STATIC_DIR, "index.html")
    if os.path.exists(frontend_file):
        return FileResponse(frontend_file)
    return {"message": "RhythmCloud Studio API", "version": "1.0.0", "docs": "/docs"}

# Remaining frontend assets (registered last so API routes win)
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
