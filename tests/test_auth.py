from datetime import timedelta
from urllib.parse import urlparse

import jwt

from app.config import settings
from app.core.security import create_session_token
from app.db.models.user import User
from tests.conftest import login, make_user


class TestLoginFlow:
    def test_start_redirects_to_provider(self, client):
        response = client.get("/auth/google/start", follow_redirects=False)
        assert response.status_code == 302
        location = response.headers["location"]
        assert urlparse(location).netloc == "accounts.google.com"
        assert "/auth/google/callback" in location

    def test_bare_provider_path_also_starts_login(self, client):
        response = client.get("/auth/google", follow_redirects=False)
        assert response.status_code == 302

    def test_unknown_provider_is_404(self, client):
        response = client.get("/auth/myspace/start", follow_redirects=False)
        assert response.status_code == 404

    def test_callback_creates_user_and_session(self, client, db_session, oauth_client):
        response = client.get("/auth/google/callback?code=abc", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert settings.SESSION_COOKIE_NAME in response.cookies
        assert oauth_client.codes == ["abc"]

        user = db_session.query(User).filter(User.google_id == "google-123").one()
        assert user.email == "ada@example.com"
        assert user.display_name == "Ada Lovelace"
        assert user.photo == "https://photos.example.com/ada.png"
        assert user.liked_songs == []

        me = client.get("/api/current_user").json()
        assert me["id"] == user.id
        assert me["googleId"] == "google-123"
        assert me["likedSongs"] == []

    def test_repeat_login_reuses_user(self, client, db_session):
        client.get("/auth/google/callback?code=one", follow_redirects=False)
        client.get("/auth/google/callback?code=two", follow_redirects=False)
        assert db_session.query(User).filter(User.google_id == "google-123").count() == 1

    def test_existing_profile_is_not_refreshed(self, client, db_session, oauth_client):
        make_user(db_session, google_id="google-123", email="old@example.com")
        client.get("/auth/google/callback?code=abc", follow_redirects=False)
        db_session.expire_all()
        user = db_session.query(User).filter(User.google_id == "google-123").one()
        assert user.email == "old@example.com"

    def test_provider_denial_creates_nothing(self, client, db_session, oauth_client):
        response = client.get("/auth/google/callback?error=access_denied", follow_redirects=False)
        assert response.status_code == 401
        assert settings.SESSION_COOKIE_NAME not in response.cookies
        assert oauth_client.codes == []
        assert db_session.query(User).count() == 0

    def test_missing_email_is_rejected(self, client, db_session, oauth_client):
        oauth_client.profile = oauth_client.profile.model_copy(update={"emails": []})
        response = client.get("/auth/google/callback?code=abc", follow_redirects=False)
        assert response.status_code == 401
        assert db_session.query(User).count() == 0


class TestSession:
    def test_anonymous_current_user_is_null(self, client):
        response = client.get("/api/current_user")
        assert response.status_code == 200
        assert response.json() is None

    def test_forged_cookie_is_anonymous(self, client, listener):
        forged = jwt.encode({"sub": str(listener.id)}, "not-the-server-secret", algorithm="HS256")
        client.cookies.set(settings.SESSION_COOKIE_NAME, forged)
        assert client.get("/api/current_user").json() is None

    def test_expired_cookie_is_anonymous(self, client, listener):
        token = create_session_token(listener.id, expires_delta=timedelta(seconds=-1))
        client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        assert client.get("/api/current_user").json() is None

    def test_deleted_user_is_anonymous(self, client, db_session, listener):
        login(client, listener)
        db_session.delete(listener)
        db_session.commit()
        response = client.get("/api/current_user")
        assert response.status_code == 200
        assert response.json() is None

    def test_logout_clears_session(self, client):
        client.get("/auth/google/callback?code=abc", follow_redirects=False)
        assert client.get("/api/current_user").json()["email"] == "ada@example.com"

        response = client.get("/api/logout", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert client.get("/api/current_user").json() is None
