"""
Google Docs connector.

Responsibilities:
- Create an empty document
- Submit a batchUpdate request list as one atomic batch (retried)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from common.docpub_common.config import Settings, settings as default_settings
from common.docpub_common.connectors.google_base import GoogleApiClient, GoogleCredentials
from common.docpub_common.utils.decorators import retry_with_backoff
from common.docpub_common.utils.exceptions import TransportError

DOCUMENT_URL_TEMPLATE = "https://docs.google.com/document/d/{document_id}/edit"
DEFAULT_TITLE = "Untitled Document"


class GoogleDocsClient(GoogleApiClient):
    """
    Docs v1 client bound to a single end-user credential.
    """

    def __init__(
        self,
        credentials: GoogleCredentials,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = settings or default_settings
        super().__init__(credentials, settings.DOCS_API_BASE, settings, transport)

    @staticmethod
    def document_url(document_id: str) -> str:
        return DOCUMENT_URL_TEMPLATE.format(document_id=document_id)

    async def create_document(self, title: Optional[str] = None, trace_id: Optional[str] = None) -> str:
        """
        Create an empty document and return its id.

        Not retried: a repeated create would leave duplicate documents.
        """
        data = await self._request(
            "create_document",
            "POST",
            "/documents",
            error_code="KA-GDOC-0001",
            trace_id=trace_id,
            json={"title": title or DEFAULT_TITLE},
        )
        document_id = data.get("documentId")
        if not document_id:
            raise TransportError("KA-GDOC-0001", "create_document: response has no documentId")
        return document_id

    @retry_with_backoff()
    async def batch_update(
        self,
        document_id: str,
        requests: List[Dict[str, Any]],
        trace_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Apply `requests` in order. The Docs API applies a batch atomically,
        so a retried batch never doubles content.
        """
        return await self._request(
            "batch_update",
            "POST",
            f"/documents/{document_id}:batchUpdate",
            error_code="KA-GDOC-0002",
            trace_id=trace_id,
            json={"requests": requests},
        )
