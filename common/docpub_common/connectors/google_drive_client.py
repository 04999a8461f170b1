"""
Google Drive connector: lists the user's Google Docs, newest first.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from common.docpub_common.config import Settings, settings as default_settings
from common.docpub_common.connectors.google_base import GoogleApiClient, GoogleCredentials
from common.docpub_common.utils.decorators import retry_with_backoff

DOCUMENT_MIME_QUERY = "mimeType='application/vnd.google-apps.document'"
DOCUMENT_FIELDS = "files(id, name, webViewLink, createdTime, modifiedTime)"
DOCUMENT_ORDER = "modifiedTime desc"


class GoogleDriveClient(GoogleApiClient):
    def __init__(
        self,
        credentials: GoogleCredentials,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = settings or default_settings
        super().__init__(credentials, settings.DRIVE_API_BASE, settings, transport)

    @retry_with_backoff()
    async def list_documents(
        self,
        query: str = DOCUMENT_MIME_QUERY,
        trace_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return file metadata (id, name, webViewLink, createdTime,
        modifiedTime) for documents matching `query`.
        """
        data = await self._request(
            "list_documents",
            "GET",
            "/files",
            error_code="KA-GDOC-0003",
            trace_id=trace_id,
            params={
                "q": query,
                "fields": DOCUMENT_FIELDS,
                "orderBy": DOCUMENT_ORDER,
            },
        )
        return data.get("files", [])
