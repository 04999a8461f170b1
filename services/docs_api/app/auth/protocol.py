"""Protocol defining the bearer-credential authenticator.

JwtAuthenticator implements it; route handlers only ever see this
interface, so signing and verification stay in one place.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol


class Authenticator(Protocol):
    """Issues and verifies short-lived bearer credentials."""

    def issue(self, claims: Dict[str, Any]) -> str:
        """Sign a new credential carrying the given identity claims.

        Args:
            claims: Identity claims (googleId, email, name, picture).

        Returns:
            The opaque bearer token.
        """
        ...

    def verify(self, token: str) -> Dict[str, Any]:
        """Check a presented credential.

        Args:
            token: The bearer token from the Authorization header.

        Returns:
            The identity claims it carries.

        Raises:
            AuthError: If the token is malformed, tampered with or expired.
        """
        ...

    def refresh(self, claims: Dict[str, Any]) -> str:
        """Re-issue a credential for an already-verified identity."""
        ...
