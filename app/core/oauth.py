# ============================================================================
# FILE: app/core/oauth.py
# Google OAuth2 authorization-code flow
# ============================================================================
from typing import Optional
from urllib.parse import urlencode
import httpx
from app.config import settings
from app.core.errors import AuthenticationError
from app.schemas.user import ProviderProfile
import logging

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
GOOGLE_SCOPES = ["openid", "email", "profile"]

class GoogleOAuthClient:
    """Talks to Google's OAuth2 endpoints and normalizes the returned profile"""

    provider = "google"

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id or settings.GOOGLE_CLIENT_ID
        self.client_secret = client_secret or settings.GOOGLE_CLIENT_SECRET
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    def authorization_url(self, redirect_uri: str) -> str:
        """URL of the consent screen"""
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": " ".join(GOOGLE_SCOPES),
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def fetch_profile(self, code: str, redirect_uri: str) -> ProviderProfile:
        """
        Exchange an authorization code for tokens and fetch the user profile.

        Raises:
            AuthenticationError: provider denied the code or could not be reached
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                token_response = await client.post(
                    GOOGLE_TOKEN_URL,
                    data={
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                        "code": code,
                        "grant_type": "authorization_code",
                        "redirect_uri": redirect_uri,
                    },
                )
                if token_response.status_code != 200:
                    logger.error(f"Google token exchange failed: {token_response.status_code} {token_response.text[:200]}")
                    raise AuthenticationError("Failed to get access token")

                access_token = token_response.json().get("access_token")
                if not access_token:
                    raise AuthenticationError("Failed to get access token")

                user_info_response = await client.get(
                    GOOGLE_USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                if user_info_response.status_code != 200:
                    logger.error(f"Google userinfo failed: {user_info_response.status_code}")
                    raise AuthenticationError("Failed to get user info")
                user_info = user_info_response.json()
        except httpx.HTTPError as e:
            logger.error(f"Google OAuth request error: {e}")
            raise AuthenticationError("Identity provider unreachable") from e

        return self.parse_profile(user_info)

    @staticmethod
    def parse_profile(user_info: dict) -> ProviderProfile:
        """Map Google's userinfo payload onto a provider-neutral profile"""
        subject = user_info.get("sub") or user_info.get("id")
        if not subject:
            raise AuthenticationError("Provider profile has no subject id")

        email = user_info.get("email")
        picture = user_info.get("picture")
        return ProviderProfile(
            id=str(subject),
            display_name=user_info.get("name") or "",
            emails=[email] if email else [],
            photos=[picture] if picture else [],
        )
