"""
TraceContext helpers for docpub.

Used by:
- HTTP request logs
- Outbound Google API calls
- Audit events

All services should propagate trace_id/span_id from request → compiler → Docs API → logs.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Mapping, Optional


TRACE_HEADER_PREFIX = "x-docpub-"


@dataclass
class TraceContext:
    trace_id: str
    span_id: str
    component: str
    stage: str
    feature: str
    parent_span_id: Optional[str] = None

    @classmethod
    def from_http_headers(
        cls,
        headers: Mapping[str, str],
        component: str,
        stage: str,
        feature: str,
    ) -> "TraceContext":
        # Starlette headers are case-insensitive; plain dicts are matched lower-case.
        def _get(key: str) -> Optional[str]:
            return headers.get(f"{TRACE_HEADER_PREFIX}{key}") or None

        return cls(
            trace_id=_get("trace-id") or new_trace_id(),
            span_id=new_span_id(),
            parent_span_id=_get("span-id"),
            component=component,
            stage=stage,
            feature=feature,
        )


def new_trace_id() -> str:
    return str(uuid.uuid4())


def new_span_id() -> str:
    return f"{int(time.time() * 1000):x}-{uuid.uuid4().hex[:8]}"


def ensure_trace(
    component: str,
    stage: str,
    feature: str,
    parent: Optional[TraceContext] = None,
) -> TraceContext:
    if parent:
        trace_id = parent.trace_id
        parent_span_id = parent.span_id
    else:
        trace_id = new_trace_id()
        parent_span_id = None

    return TraceContext(
        trace_id=trace_id,
        span_id=new_span_id(),
        parent_span_id=parent_span_id,
        component=component,
        stage=stage,
        feature=feature,
    )
