"""
KA error code registry for docpub.

Each code has:
- description
- default http_status
- retriable flag
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ErrorInfo:
    code: str
    description: str
    http_status: int = 500
    retriable: bool = False


# Core registry
_KA_REGISTRY: Dict[str, ErrorInfo] = {
    # API
    "KA-API-0001": ErrorInfo("KA-API-0001", "Generic API error", 500, False),

    # Bearer credentials
    "KA-SEC-0401": ErrorInfo("KA-SEC-0401", "Access token is required", 401, False),
    "KA-SEC-0403": ErrorInfo("KA-SEC-0403", "Invalid or expired token", 403, False),

    # Identity provider (Google OAuth / userinfo)
    "KA-IDP-0001": ErrorInfo("KA-IDP-0001", "Identity provider rejected the credential", 401, False),
    "KA-IDP-0002": ErrorInfo("KA-IDP-0002", "Authorization code exchange failed", 502, False),

    # Remote document store (Docs / Drive)
    "KA-GDOC-0001": ErrorInfo("KA-GDOC-0001", "Document create failure", 502, False),
    "KA-GDOC-0002": ErrorInfo("KA-GDOC-0002", "Batch update rejected", 502, False),
    "KA-GDOC-0003": ErrorInfo("KA-GDOC-0003", "Document listing failure", 502, False),
    "KA-GDOC-0429": ErrorInfo("KA-GDOC-0429", "Remote API rate limited", 503, True),
    "KA-GDOC-0503": ErrorInfo("KA-GDOC-0503", "Remote API unavailable", 503, True),
    "KA-NET-0001": ErrorInfo("KA-NET-0001", "Network failure reaching remote API", 504, True),
}


def get_error_info(code: str) -> ErrorInfo:
    """Return ErrorInfo for a given KA code, or a generic one if not registered."""
    return _KA_REGISTRY.get(
        code,
        ErrorInfo(code=code, description="Unknown docpub error code", http_status=500, retriable=False),
    )
