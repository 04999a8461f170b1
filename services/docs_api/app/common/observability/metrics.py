# app/common/observability/metrics.py
from typing import Optional, Dict
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST


# Compiler metrics
compile_blocks_counter = Counter(
    'docpub_compile_total',
    'Total blocks compiled',
    ['kind']
)

compile_operations_histogram = Histogram(
    'docpub_compile_operations',
    'Operations emitted per compiled document',
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000)
)

# Google API metrics
google_requests_counter = Counter(
    'docpub_google_requests_total',
    'Total calls to Google Docs / Drive / OAuth',
    ['operation', 'status']
)

google_latency_histogram = Histogram(
    'docpub_google_latency_ms',
    'Google API call latency',
    ['operation'],
    buckets=(10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)
)

# Publishing
publish_counter = Counter(
    'docpub_publish_total',
    'Documents published to Google Drive',
    ['status']
)

# Generic HTTP
api_requests_counter = Counter(
    'docpub_api_requests_total',
    'Total API requests',
    ['route', 'method', 'status']
)


class MetricsService:
    """Metrics facade used by services and connectors"""

    def increment_counter(
        self,
        name: str,
        value: int = 1,
        labels: Optional[Dict[str, str]] = None
    ) -> None:
        """Increment any counter by name"""
        labels = labels or {}

        if name == "compile_total":
            compile_blocks_counter.labels(**labels).inc(value)
        elif name == "google_requests_total":
            google_requests_counter.labels(**labels).inc(value)
        elif name == "publish_total":
            publish_counter.labels(**labels).inc(value)
        elif name == "api_requests_total":
            api_requests_counter.labels(**labels).inc(value)

    def record_histogram(
        self,
        name: str,
        value: float,
        labels: Optional[Dict[str, str]] = None
    ) -> None:
        """Record histogram value for any metric"""
        labels = labels or {}

        if name == "compile_operations":
            compile_operations_histogram.observe(value)
        elif name == "google_latency_ms":
            google_latency_histogram.labels(**labels).observe(value)

    def get_metrics_text(self) -> str:
        """Export all metrics in Prometheus format"""
        return generate_latest().decode('utf-8')

    def get_content_type(self) -> str:
        """Get Prometheus content type"""
        return CONTENT_TYPE_LATEST


# Global instance
metrics = MetricsService()


def increment_counter(name: str, labels: Optional[Dict[str, str]] = None, value: int = 1) -> None:
    metrics.increment_counter(name, value, labels)


def record_histogram(name: str, value: float, labels: Optional[Dict[str, str]] = None) -> None:
    metrics.record_histogram(name, value, labels)


def get_metrics_text() -> str:
    """Used by main.py /metrics endpoint."""
    return metrics.get_metrics_text()
