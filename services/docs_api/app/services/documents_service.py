# app/services/documents_service.py
from typing import Any, Dict, List, Optional

from common.docpub_common.connectors.google_base import GoogleCredentials
from common.docpub_common.connectors.google_drive_client import GoogleDriveClient
from common.docpub_common.logging.logger import get_logger, bind_trace
from common.docpub_common.utils.exceptions import DocPubError
from common.docpub_common.utils.timing import start_timer
from common.docpub_common.utils.tracing import TraceContext, ensure_trace
from services.docs_api.app.common.exceptions import DocumentListException
from services.docs_api.app.common.observability import ErrorLoggingService
from services.docs_api.app.common.observability.metrics import increment_counter, record_histogram

logger = get_logger("api.documents.list")


async def list_documents(
    credentials: GoogleCredentials,
    *,
    user_id: Optional[str] = None,
    trace_ctx: Optional[TraceContext] = None,
    drive_client: Optional[GoogleDriveClient] = None,
) -> List[Dict[str, Any]]:
    """
    List the user's Google Docs, most recently modified first.
    """
    trace_ctx = trace_ctx or ensure_trace("api", "documents", "list")
    client = drive_client or GoogleDriveClient(credentials)
    timer = start_timer()

    try:
        documents = await client.list_documents(trace_id=trace_ctx.trace_id)
    except DocPubError as e:
        latency_ms = timer.stop()
        increment_counter("google_requests_total", labels={"operation": "list_documents", "status": "error"})
        record_histogram("google_latency_ms", latency_ms, labels={"operation": "list_documents"})
        ErrorLoggingService().log_error(
            user_id=user_id,
            document_id=None,
            task="docpub.drive.list",
            error_code=e.code,
            reason=e.detail,
            retriable=e.retriable,
            trace_id=trace_ctx.trace_id
        )
        raise DocumentListException(details=e.detail) from e

    latency_ms = timer.stop()
    increment_counter("google_requests_total", labels={"operation": "list_documents", "status": "success"})
    record_histogram("google_latency_ms", latency_ms, labels={"operation": "list_documents"})

    logger.info(
        "documents_listed",
        extra=bind_trace(logger, trace_ctx, {"user_id": user_id, "duration_ms": latency_ms})
    )
    return documents
