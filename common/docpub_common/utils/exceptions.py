"""
Shared exception hierarchy for docpub.

All services should raise DocPubError (or subclasses) with a KA code.
"""

from __future__ import annotations

from typing import Optional

from common.docpub_common.utils.error_codes import get_error_info, ErrorInfo


class DocPubError(Exception):
    """Base exception for all platform errors."""

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        *,
        http_status: Optional[int] = None,
        retriable: Optional[bool] = None,
    ) -> None:
        self.info: ErrorInfo = get_error_info(code)
        self.code: str = self.info.code
        self.http_status: int = http_status or self.info.http_status
        self.retriable: bool = retriable if retriable is not None else self.info.retriable
        self.detail: str = message or self.info.description
        super().__init__(f"{self.code}: {self.detail}")



class AuthError(DocPubError):
    """Bearer credential missing, invalid or expired."""


class IdentityProviderError(DocPubError):
    """Google OAuth / userinfo rejected the end-user credential."""


class TransportError(DocPubError):
    """Remote Docs / Drive call failed or was rejected."""
