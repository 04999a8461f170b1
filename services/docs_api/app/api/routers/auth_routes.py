# app/api/routers/auth_routes.py
from typing import Any, Dict
from urllib.parse import urlencode

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from common.docpub_common.config import settings
from common.docpub_common.connectors.google_identity_client import GoogleIdentityClient
from common.docpub_common.logging.logger import get_logger, bind_trace
from common.docpub_common.utils.exceptions import IdentityProviderError
from common.docpub_common.utils.tracing import TraceContext
from services.docs_api.app.api.dependencies import (
    get_authenticator,
    get_current_user,
    get_identity_client,
    get_trace_context,
)
from services.docs_api.app.api.schemas.auth import (
    AuthUrlResponse,
    GoogleLoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    TokenResponse,
)
from services.docs_api.app.auth import Authenticator
from services.docs_api.app.common.error_codes import ErrorCodes
from services.docs_api.app.common.exceptions import AppException
from services.docs_api.app.common.observability import AuditService
from services.docs_api.app.services.auth_service import login_with_google

router = APIRouter(tags=["Auth"])

logger = get_logger("api.routes.auth")


@router.post("/api/auth/google", response_model=LoginResponse)
async def google_login(
    request: GoogleLoginRequest,
    identity_client: GoogleIdentityClient = Depends(get_identity_client),
    authenticator: Authenticator = Depends(get_authenticator),
    trace_ctx: TraceContext = Depends(get_trace_context),
):
    """
    Exchange a Google access token for a docpub bearer token.
    """
    if not request.accessToken:
        raise AppException(
            message="Google access token is required",
            code=ErrorCodes.BAD_REQUEST
        )

    token, user = await login_with_google(
        request.accessToken,
        identity_client=identity_client,
        authenticator=authenticator,
        trace_id=trace_ctx.trace_id
    )
    return LoginResponse(token=token, user=user)


@router.post("/api/auth/refresh", response_model=TokenResponse)
async def refresh_token(
    user: Dict[str, Any] = Depends(get_current_user),
    authenticator: Authenticator = Depends(get_authenticator),
    trace_ctx: TraceContext = Depends(get_trace_context),
):
    """Re-issue a bearer token for the already-verified caller."""
    AuditService().log_action(
        user_id=user.get("googleId"),
        action="docpub.auth.refresh",
        object_id=None,
        payload={},
        trace_id=trace_ctx.trace_id
    )
    return TokenResponse(token=authenticator.refresh(user))


@router.get("/api/user/profile", response_model=ProfileResponse)
async def user_profile(user: Dict[str, Any] = Depends(get_current_user)):
    return ProfileResponse(user=user)


@router.post("/api/auth/logout", response_model=MessageResponse)
async def logout(user: Dict[str, Any] = Depends(get_current_user)):
    # Tokens are stateless; the client discards its copy.
    return MessageResponse(message="Logged out successfully")


@router.get("/api/auth/google/url", response_model=AuthUrlResponse)
async def google_auth_url(
    identity_client: GoogleIdentityClient = Depends(get_identity_client),
):
    """Consent URL the web client redirects the user to."""
    return AuthUrlResponse(url=identity_client.authorization_url())


@router.get("/auth/google/callback")
async def google_callback(
    code: str = "",
    identity_client: GoogleIdentityClient = Depends(get_identity_client),
    trace_ctx: TraceContext = Depends(get_trace_context),
):
    """
    OAuth redirect target: trade the code for tokens and hand the
    access token to the frontend.
    """
    try:
        tokens = await identity_client.exchange_code(code)
    except IdentityProviderError as e:
        logger.error(
            "oauth_callback_error",
            extra=bind_trace(logger, trace_ctx, {"ka_code": e.code})
        )
        return RedirectResponse(f"{settings.FRONTEND_URL}/auth-error", status_code=302)

    return RedirectResponse(
        f"{settings.FRONTEND_URL}/auth-callback?{urlencode({'token': tokens['access_token']})}",
        status_code=302
    )
