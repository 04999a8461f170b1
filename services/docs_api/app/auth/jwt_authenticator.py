"""
HS256 JWT implementation of the Authenticator protocol.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from common.docpub_common.config import Settings, settings as default_settings
from common.docpub_common.logging.logger import get_logger
from common.docpub_common.utils.exceptions import AuthError

logger = get_logger("auth.jwt.verify")

# Registered claims added at signing time; stripped before claims leave this module.
_REGISTERED_CLAIMS = ("exp", "iat", "nbf")


def _identity_claims(claims: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS}


class JwtAuthenticator:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=expires_minutes)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JwtAuthenticator":
        settings = settings or default_settings
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_minutes=settings.JWT_EXPIRES_MINUTES,
        )

    def issue(self, claims: Dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            **_identity_claims(claims),
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            logger.info("rejected expired token", extra={"ka_code": "KA-SEC-0403"})
            raise AuthError("KA-SEC-0403", "Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.info("rejected invalid token: %s", exc, extra={"ka_code": "KA-SEC-0403"})
            raise AuthError("KA-SEC-0403", "Token is invalid") from exc
        return _identity_claims(payload)

    def refresh(self, claims: Dict[str, Any]) -> str:
        return self.issue(claims)
