from typing import Optional, Dict, Any

from common.docpub_common.logging.logger import get_logger


class AuditService:
    """Audit trail for user-visible actions, written as structured log lines"""

    def __init__(self, logger_name: str = "audit.docpub.action"):
        self.logger = get_logger(logger_name)

    def log_action(
        self,
        user_id: Optional[str],
        action: str,
        object_id: Optional[str],
        payload: Dict[str, Any],
        trace_id: str
    ) -> None:
        """
        Record one action.

        Examples:
            action="docpub.document.publish"
            action="docpub.auth.login"
            action="docpub.auth.refresh"
        """
        self.logger.info(
            "action=%s object_id=%s payload=%s",
            action,
            object_id,
            payload,
            extra={
                "trace_id": trace_id,
                "user_id": user_id,
                "document_id": object_id,
                "feature": action,
            },
        )
