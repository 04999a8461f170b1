# app/api/routers/documents_routes.py
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends

from common.docpub_common.connectors.google_base import GoogleCredentials
from common.docpub_common.connectors.google_docs_client import GoogleDocsClient
from common.docpub_common.connectors.google_drive_client import GoogleDriveClient
from common.docpub_common.logging.logger import get_logger, bind_trace
from common.docpub_common.utils.tracing import TraceContext
from services.docs_api.app.api.dependencies import (
    get_current_user,
    get_google_transport,
    get_trace_context,
)
from services.docs_api.app.api.schemas.documents import (
    CompileRequest,
    CompileResponse,
    DocumentListResponse,
    SaveToDriveRequest,
    SaveToDriveResponse,
)
from services.docs_api.app.common.error_codes import ErrorCodes
from services.docs_api.app.common.exceptions import AppException
from services.docs_api.app.compiler import compile_to_requests
from services.docs_api.app.services.documents_service import list_documents
from services.docs_api.app.services.publish_service import publish_document

router = APIRouter(prefix="/api", tags=["Documents"])

logger = get_logger("api.routes.documents")


def _require_google_token(access_token: Optional[str]) -> GoogleCredentials:
    if not access_token:
        raise AppException(
            message="No Google access token provided",
            code=ErrorCodes.GOOGLE_TOKEN_MISSING
        )
    return GoogleCredentials(access_token=access_token)


@router.post("/save-to-drive", response_model=SaveToDriveResponse)
async def save_to_drive(
    request: SaveToDriveRequest,
    user: Dict[str, Any] = Depends(get_current_user),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_google_transport),
    trace_ctx: TraceContext = Depends(get_trace_context),
):
    """
    Create a Google Doc from rich-text markup.

    Request Body:
        title: Document title (defaults to "Untitled Document")
        content: Markup to compile
        accessToken: The user's Google access token
    """
    credentials = _require_google_token(request.accessToken)

    logger.info(
        "save_request_start",
        extra=bind_trace(logger, trace_ctx, {"user_id": user.get("googleId")})
    )

    result = await publish_document(
        request.title,
        request.content,
        credentials,
        user_id=user.get("googleId"),
        trace_ctx=trace_ctx,
        docs_client=GoogleDocsClient(credentials, transport=transport),
    )

    return SaveToDriveResponse(
        success=True,
        documentId=result.document_id,
        documentUrl=result.document_url,
    )


@router.get("/get-documents", response_model=DocumentListResponse)
async def get_documents(
    accessToken: Optional[str] = None,
    user: Dict[str, Any] = Depends(get_current_user),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_google_transport),
    trace_ctx: TraceContext = Depends(get_trace_context),
):
    """List the caller's Google Docs, most recently modified first."""
    credentials = _require_google_token(accessToken)

    documents = await list_documents(
        credentials,
        user_id=user.get("googleId"),
        trace_ctx=trace_ctx,
        drive_client=GoogleDriveClient(credentials, transport=transport),
    )
    return DocumentListResponse(success=True, documents=documents)


@router.post("/compile", response_model=CompileResponse)
async def compile_preview(
    request: CompileRequest,
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Dry run: the batchUpdate requests save-to-drive would submit."""
    requests = compile_to_requests(request.content)
    return CompileResponse(operations=len(requests), requests=requests)
