# app/services/publish_service.py
from dataclasses import dataclass
from typing import Optional

from common.docpub_common.connectors.google_base import GoogleCredentials
from common.docpub_common.connectors.google_docs_client import GoogleDocsClient
from common.docpub_common.logging.logger import get_logger, bind_trace, log_span
from common.docpub_common.utils.exceptions import DocPubError
from common.docpub_common.utils.timing import start_timer
from common.docpub_common.utils.tracing import TraceContext, ensure_trace
from services.docs_api.app.common.error_codes import ErrorCodes
from services.docs_api.app.common.exceptions import DocumentSaveException
from services.docs_api.app.common.observability import AuditService, ErrorLoggingService
from services.docs_api.app.common.observability.metrics import increment_counter, record_histogram
from services.docs_api.app.compiler import compile_blocks, to_requests

logger = get_logger("api.publish.save_to_drive")


@dataclass(frozen=True)
class PublishResult:
    document_id: str
    document_url: str
    operations: int


@log_span("api", "publish", "save_to_drive")
async def publish_document(
    title: Optional[str],
    content: str,
    credentials: GoogleCredentials,
    *,
    user_id: Optional[str] = None,
    trace_ctx: Optional[TraceContext] = None,
    docs_client: Optional[GoogleDocsClient] = None,
) -> PublishResult:
    """
    Create a Google Doc and fill it with the compiled markup.

    The document is created first, the markup compiled, and the whole
    edit script submitted as one batch. An empty script skips the batch.
    """
    trace_ctx = trace_ctx or ensure_trace("api", "publish", "save_to_drive")
    client = docs_client or GoogleDocsClient(credentials)

    audit_service = AuditService()
    error_service = ErrorLoggingService()

    # -- create -------------------------------------------------------
    timer = start_timer()
    try:
        document_id = await client.create_document(title, trace_id=trace_ctx.trace_id)
    except DocPubError as e:
        _record_google_call("create_document", "error", timer.stop())
        error_service.log_error(
            user_id=user_id,
            document_id=None,
            task="docpub.document.create",
            error_code=e.code,
            reason=e.detail,
            retriable=e.retriable,
            trace_id=trace_ctx.trace_id
        )
        increment_counter("publish_total", labels={"status": "error"})
        raise DocumentSaveException(details=e.detail, code=ErrorCodes.DOC_CREATE_FAILED) from e
    _record_google_call("create_document", "success", timer.stop())

    # -- compile ------------------------------------------------------
    blocks, operations = compile_blocks(content or "")
    for block in blocks:
        increment_counter("compile_total", labels={"kind": block.kind.value})
    record_histogram("compile_operations", len(operations))

    # -- transmit -----------------------------------------------------
    if operations:
        timer = start_timer()
        try:
            await client.batch_update(document_id, to_requests(operations), trace_id=trace_ctx.trace_id)
        except DocPubError as e:
            _record_google_call("batch_update", "error", timer.stop())
            error_service.log_error(
                user_id=user_id,
                document_id=document_id,
                task="docpub.document.batch_update",
                error_code=e.code,
                reason=e.detail,
                retriable=e.retriable,
                trace_id=trace_ctx.trace_id
            )
            increment_counter("publish_total", labels={"status": "error"})
            raise DocumentSaveException(details=e.detail) from e
        _record_google_call("batch_update", "success", timer.stop())

    document_url = client.document_url(document_id)

    audit_service.log_action(
        user_id=user_id,
        action="docpub.document.publish",
        object_id=document_id,
        payload={
            "blocks": len(blocks),
            "operations": len(operations),
            "content_length": len(content or ""),
        },
        trace_id=trace_ctx.trace_id
    )
    increment_counter("publish_total", labels={"status": "success"})

    logger.info(
        "document_published",
        extra=bind_trace(logger, trace_ctx, {"document_id": document_id, "user_id": user_id})
    )

    return PublishResult(
        document_id=document_id,
        document_url=document_url,
        operations=len(operations),
    )


def _record_google_call(operation: str, status: str, latency_ms: float) -> None:
    increment_counter("google_requests_total", labels={"operation": operation, "status": status})
    record_histogram("google_latency_ms", latency_ms, labels={"operation": operation})
