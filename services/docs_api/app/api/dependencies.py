# app/api/dependencies.py
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from common.docpub_common.connectors.google_identity_client import GoogleIdentityClient
from common.docpub_common.utils.exceptions import AuthError
from common.docpub_common.utils.tracing import TraceContext
from services.docs_api.app.auth import Authenticator, JwtAuthenticator
from services.docs_api.app.common.error_codes import ErrorCodes
from services.docs_api.app.common.exceptions import UnauthorizedException

_bearer = HTTPBearer(auto_error=False)


def get_google_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for outbound Google calls; None means the real network."""
    return None


def get_authenticator() -> Authenticator:
    return JwtAuthenticator.from_settings()


def get_identity_client(
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_google_transport),
) -> GoogleIdentityClient:
    return GoogleIdentityClient(transport=transport)


def get_trace_context(request: Request) -> TraceContext:
    return TraceContext.from_http_headers(
        request.headers,
        component="api",
        stage="route",
        feature=request.url.path,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    authenticator: Authenticator = Depends(get_authenticator),
) -> Dict[str, Any]:
    """
    Claims of the caller's bearer credential.

    Missing credential -> 401, rejected credential -> 403.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException(
            message="Access token is required",
            code=ErrorCodes.TOKEN_MISSING
        )
    try:
        return authenticator.verify(credentials.credentials)
    except AuthError as e:
        raise UnauthorizedException() from e
