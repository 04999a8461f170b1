"""
Shared HTTP plumbing for the Google connectors.

Responsibilities:
- Hold the per-request credential (never mutated, never shared)
- Issue one HTTP call with timeout
- Map transport / HTTP failures onto KA-coded TransportError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from common.docpub_common.config import Settings, settings as default_settings
from common.docpub_common.logging.logger import get_logger
from common.docpub_common.utils.exceptions import TransportError
from common.docpub_common.utils.timing import start_timer


@dataclass(frozen=True)
class GoogleCredentials:
    """
    OAuth access token for one end user.

    Build one per request and pass it explicitly to the clients.
    """

    access_token: str

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    def __repr__(self) -> str:
        return "GoogleCredentials(access_token=***)"


class GoogleApiClient:
    """
    Base class for Docs / Drive clients bound to one credential.
    """

    def __init__(
        self,
        credentials: GoogleCredentials,
        base_url: str,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Parameters
        ----------
        credentials : GoogleCredentials
            End-user access token for this request.
        base_url : str
            API root, e.g. https://docs.googleapis.com/v1.
        settings : Settings
            Timeouts; defaults to the global settings.
        transport : httpx.AsyncBaseTransport
            Optional transport override (tests use httpx.MockTransport).
        """
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._settings = settings or default_settings
        self._transport = transport

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        error_code: str,
        trace_id: Optional[str] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Perform one call and return the decoded JSON body.

        429 and 5xx responses and network failures raise a retriable
        TransportError; other 4xx responses raise one with `error_code`.
        """
        logger = get_logger(f"google.api.{operation}")
        timer = start_timer()
        timeout = self._settings.HTTP_TIMEOUT_MS / 1000.0

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                resp = await client.request(
                    method,
                    f"{self._base_url}{path}",
                    headers=self._credentials.auth_headers(),
                    **kwargs,
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "%s %s network failure: %s",
                method,
                path,
                exc,
                extra={"trace_id": trace_id, "ka_code": "KA-NET-0001", "duration_ms": timer.elapsed_ms},
            )
            raise TransportError("KA-NET-0001", f"{operation}: {exc}") from exc

        extra = {"trace_id": trace_id, "duration_ms": timer.stop()}

        if resp.status_code == 429:
            raise TransportError("KA-GDOC-0429", f"{operation}: rate limited")
        if resp.status_code >= 500:
            raise TransportError(
                "KA-GDOC-0503",
                f"{operation}: HTTP {resp.status_code} {resp.text[:200]}",
            )
        if resp.status_code >= 400:
            logger.error(
                "%s %s rejected with HTTP %d",
                method,
                path,
                resp.status_code,
                extra={**extra, "ka_code": error_code},
            )
            raise TransportError(
                error_code,
                f"{operation}: HTTP {resp.status_code} {resp.text[:200]}",
                http_status=resp.status_code,
            )

        logger.info("%s %s -> %d", method, path, resp.status_code, extra=extra)
        if not resp.content:
            return {}
        return resp.json()
