# app/services/auth_service.py
from typing import Any, Dict, Optional, Tuple

from common.docpub_common.connectors.google_identity_client import GoogleIdentityClient
from common.docpub_common.logging.logger import get_logger
from common.docpub_common.utils.exceptions import IdentityProviderError
from services.docs_api.app.auth.protocol import Authenticator
from services.docs_api.app.common.exceptions import GoogleAuthException
from services.docs_api.app.common.observability import AuditService

logger = get_logger("auth.service.login")


async def login_with_google(
    access_token: str,
    identity_client: GoogleIdentityClient,
    authenticator: Authenticator,
    trace_id: Optional[str] = None,
) -> Tuple[str, Dict[str, Any]]:
    """
    Verify a Google access token with the identity provider and issue
    our own bearer credential for the resulting identity.

    Returns (token, user claims).
    """
    try:
        user = await identity_client.fetch_user(access_token)
    except IdentityProviderError as e:
        logger.warning("google login rejected: %s", e.detail, extra={"trace_id": trace_id, "ka_code": e.code})
        raise GoogleAuthException(details=e.detail) from e

    token = authenticator.issue(user)

    AuditService().log_action(
        user_id=user.get("googleId"),
        action="docpub.auth.login",
        object_id=None,
        payload={"email": user.get("email")},
        trace_id=trace_id or "",
    )
    return token, user
