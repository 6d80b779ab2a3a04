"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.config import settings
from app.db.base import Base
from app.db.models import song, user  # noqa: F401
from app.db.models.user import User
from app.db.session import get_db
from app.api.dependencies import get_storage
from app.core.errors import StorageUploadError
from app.core.security import create_session_token
from app.schemas.user import ProviderProfile

ADMIN_EMAIL = "admin@rhythmcloud.test"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeStorage:
    """Records uploads instead of talking to a bucket."""

    def __init__(self, fail=False):
        self.fail = fail
        self.uploads = []

    def upload_audio(self, fileobj):
        data = fileobj.read()
        if self.fail:
            raise StorageUploadError("rhythmcloud-studio/broken.mp3", "bucket unavailable")
        self.uploads.append(data)
        return f"https://cdn.rhythmcloud.test/rhythmcloud-studio/{len(self.uploads)}.mp3"


class FakeOAuthClient:
    provider = "google"

    def __init__(self, profile=None):
        self.profile = profile
        self.codes = []

    def authorization_url(self, redirect_uri):
        return f"https://accounts.google.com/o/oauth2/v2/auth?redirect_uri={redirect_uri}"

    async def fetch_profile(self, code, redirect_uri):
        self.codes.append(code)
        return self.profile


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def oauth_client():
    return FakeOAuthClient(
        ProviderProfile(
            id="google-123",
            display_name="Ada Lovelace",
            emails=["ada@example.com", "ada@work.example.com"],
            photos=["https://photos.example.com/ada.png"],
        )
    )


@pytest.fixture
def client(db_session, storage, oauth_client, monkeypatch):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    monkeypatch.setattr(settings, "ADMIN_EMAIL", ADMIN_EMAIL)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.state.oauth_clients = {"google": oauth_client}
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db, google_id="google-1", email="listener@example.com"):
    user = User(google_id=google_id, display_name="Listener", email=email, photo="")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, user):
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id))


@pytest.fixture
def listener(db_session):
    return make_user(db_session)


@pytest.fixture
def admin(db_session):
    return make_user(db_session, google_id="google-admin", email=ADMIN_EMAIL)
