"""
Google identity connector (OAuth 2.0 + OpenID userinfo).

Responsibilities:
- Build the consent URL for the web client
- Exchange an authorization code for tokens
- Resolve an access token to the end user's profile claims
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from common.docpub_common.config import Settings, settings as default_settings
from common.docpub_common.logging.logger import get_logger
from common.docpub_common.utils.exceptions import IdentityProviderError

logger = get_logger("auth.google.identity")


def user_claims(userinfo: Dict[str, Any]) -> Dict[str, Any]:
    """Map an OpenID userinfo payload onto the claims carried in our tokens."""
    return {
        "googleId": userinfo.get("sub"),
        "email": userinfo.get("email"),
        "name": userinfo.get("name"),
        "picture": userinfo.get("picture"),
    }


class GoogleIdentityClient:
    """
    Stateless client for the Google identity endpoints.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._settings.HTTP_TIMEOUT_MS / 1000.0,
            transport=self._transport,
        )

    def authorization_url(self, state: Optional[str] = None) -> str:
        """Consent URL requesting offline access to profile, email, Drive and Docs."""
        params = {
            "client_id": self._settings.GOOGLE_CLIENT_ID,
            "redirect_uri": self._settings.REDIRECT_URI,
            "response_type": "code",
            "access_type": "offline",
            "prompt": "consent",
            "scope": " ".join(self._settings.GOOGLE_SCOPES),
        }
        if state:
            params["state"] = state
        return f"{self._settings.GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> Dict[str, Any]:
        """
        Trade an authorization code for tokens (access_token, refresh_token, ...).
        """
        if not code:
            raise IdentityProviderError("KA-IDP-0002", "Missing authorization code")

        form = {
            "code": code,
            "client_id": self._settings.GOOGLE_CLIENT_ID,
            "client_secret": self._settings.GOOGLE_CLIENT_SECRET,
            "redirect_uri": self._settings.REDIRECT_URI,
            "grant_type": "authorization_code",
        }
        try:
            async with self._client() as client:
                resp = await client.post(self._settings.GOOGLE_TOKEN_URL, data=form)
                resp.raise_for_status()
                tokens = resp.json()
        except httpx.HTTPError as exc:
            logger.warning("code exchange failed: %s", exc, extra={"ka_code": "KA-IDP-0002"})
            raise IdentityProviderError("KA-IDP-0002", str(exc)) from exc

        if "access_token" not in tokens:
            raise IdentityProviderError("KA-IDP-0002", "Token response has no access_token")
        return tokens

    async def fetch_user(self, access_token: str) -> Dict[str, Any]:
        """
        Resolve a Google access token to {googleId, email, name, picture}.
        """
        try:
            async with self._client() as client:
                resp = await client.get(
                    self._settings.GOOGLE_USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                resp.raise_for_status()
                userinfo = resp.json()
        except httpx.HTTPError as exc:
            logger.warning("userinfo lookup failed: %s", exc, extra={"ka_code": "KA-IDP-0001"})
            raise IdentityProviderError("KA-IDP-0001", str(exc)) from exc

        claims = user_claims(userinfo)
        if not claims["googleId"]:
            raise IdentityProviderError("KA-IDP-0001", "userinfo response has no subject")
        return claims
