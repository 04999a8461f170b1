from typing import Optional

from common.docpub_common.logging.logger import get_logger


class ErrorLoggingService:
    """Records failed tasks with their KA code"""

    def __init__(self, logger_name: str = "audit.docpub.error"):
        self.logger = get_logger(logger_name)

    def log_error(
        self,
        user_id: Optional[str],
        document_id: Optional[str],
        task: str,
        error_code: str,
        reason: str,
        retriable: bool,
        trace_id: str
    ) -> None:
        """
        Examples:
            task="docpub.document.create"
            task="docpub.document.batch_update"
            task="docpub.drive.list"
        """
        self.logger.error(
            "task=%s code=%s retriable=%s reason=%s",
            task,
            error_code,
            retriable,
            reason,
            extra={
                "trace_id": trace_id,
                "user_id": user_id,
                "document_id": document_id,
                "ka_code": error_code,
                "feature": task,
            },
        )
