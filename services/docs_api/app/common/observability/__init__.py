from services.docs_api.app.common.observability.audit import AuditService
from services.docs_api.app.common.observability.error_logging import ErrorLoggingService
from services.docs_api.app.common.observability.metrics import metrics, MetricsService

__all__ = ['AuditService', 'ErrorLoggingService', 'metrics', 'MetricsService']
