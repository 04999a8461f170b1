"""
Structured logging utilities for docpub.

All modules (compiler, Google connectors, auth, HTTP routes) should use
these helpers so logs are consistent and traceable.

Log fields to always include:
- trace_id
- component (compiler|google|auth|api|audit)
- stage (compile|transmit|verify|route)
- feature (high-level feature name)
- ka_code (optional KA-XXX-NNNN)
"""

from __future__ import annotations

import functools
import logging
import logging.config
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from common.docpub_common.config import settings
from common.docpub_common.utils.exceptions import DocPubError
from common.docpub_common.utils.timing import start_timer
from common.docpub_common.utils.tracing import TraceContext, ensure_trace

_LOGGER_INITIALIZED = False
_COMPONENT_HANDLERS: Dict[str, logging.Handler] = {}

_KNOWN_COMPONENTS = ("compiler", "google", "auth", "api", "audit", "docpub")

_CONTEXT_FIELDS = (
    "trace_id", "span_id", "parent_span_id",
    "feature", "component", "stage",
    "user_id", "document_id", "http_method", "route",
    "ka_code", "duration_ms",
)


# -----------------------------------------------------------------------------
# 1. COMPONENT FROM LOGGER NAME
# -----------------------------------------------------------------------------
def _extract_component(logger_name: str) -> str:
    """
    Extract component name from logger name.

    Examples:
    - "compiler.markup.emit" -> "compiler"
    - "google.docs.batch_update" -> "google"
    - "uvicorn.error" -> "docpub"
    """
    first_part = logger_name.split(".")[0].lower()
    if first_part in _KNOWN_COMPONENTS:
        return first_part
    return "docpub"


# -----------------------------------------------------------------------------
# 2. STANDARD CONTEXT FILTER (trace, span, feature)
# -----------------------------------------------------------------------------
class DocPubContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # JSON formatter below expects every context field to exist
        for a in _CONTEXT_FIELDS:
            if not hasattr(record, a):
                setattr(record, a, None)
        return True


# -----------------------------------------------------------------------------
# 3. GET OR CREATE COMPONENT FILE HANDLER
# -----------------------------------------------------------------------------
def _get_component_file_handler(component: str) -> Optional[logging.Handler]:
    """
    Get or create a rotating handler writing LOG_DIR/{component}/app.log.
    Returns None when file logging is disabled.
    """
    if not settings.LOG_FILES_ENABLED:
        return None

    if component in _COMPONENT_HANDLERS:
        return _COMPONENT_HANDLERS[component]

    component_log_dir = Path(settings.LOG_DIR) / component
    component_log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=str(component_log_dir / "app.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            '{"ts": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s", '
            '"trace_id": "%(trace_id)s", "span_id": "%(span_id)s", '
            '"parent_span_id": "%(parent_span_id)s", "component": "%(component)s", '
            '"stage": "%(stage)s", "feature": "%(feature)s", '
            '"ka_code": "%(ka_code)s", "duration_ms": "%(duration_ms)s", '
            '"user_id": "%(user_id)s", "document_id": "%(document_id)s"}'
        )
    )
    handler.addFilter(DocPubContextFilter())
    handler.setLevel(logging.DEBUG)

    _COMPONENT_HANDLERS[component] = handler
    return handler


# -----------------------------------------------------------------------------
# 4. LOAD LOGGING.YAML
# -----------------------------------------------------------------------------
def _load_logging_yaml() -> None:
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    cfg_path = Path(settings.LOGGING_YAML)
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=logging.INFO)

    _LOGGER_INITIALIZED = True


# -----------------------------------------------------------------------------
# 5. GET LOGGER
# -----------------------------------------------------------------------------
def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with component-based file logging.

    Parameters
    ----------
    name : str
        Logger name (e.g., "compiler.markup.emit", "google.docs.batch_update")

    Returns
    -------
    logging.Logger
        Configured logger with context filter and component file handler.
    """
    _load_logging_yaml()
    logger = logging.getLogger(name)

    if not any(isinstance(f, DocPubContextFilter) for f in logger.filters):
        logger.addFilter(DocPubContextFilter())

    file_handler = _get_component_file_handler(_extract_component(name))
    if file_handler is not None and file_handler not in logger.handlers:
        logger.addHandler(file_handler)

    return logger


# -----------------------------------------------------------------------------
# 6. bind_trace(): attach trace context into logs
# -----------------------------------------------------------------------------
def bind_trace(
    logger: logging.Logger,
    ctx: TraceContext,
    extra: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:

    base = {
        "trace_id": ctx.trace_id,
        "span_id": ctx.span_id,
        "parent_span_id": ctx.parent_span_id,
        "component": ctx.component,
        "stage": ctx.stage,
        "feature": ctx.feature,
    }
    if extra:
        base.update(extra)
    return base


# -----------------------------------------------------------------------------
# 7. log_span() wrapper for async service functions
#
#     @log_span("docpub", "publish", "save_to_drive")
#     async def fn(..., trace_ctx=None):
#         ...
# -----------------------------------------------------------------------------
def log_span(component: str, stage: str, feature: str):
    """
    Decorator used by the publishing services.
    Produces:
    - span_start
    - span_end (with duration_ms)
    - span_error (KA-code included)
    """

    def decorator(fn):
        logger = get_logger(f"{component}.{stage}.{feature}")

        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            ctx: TraceContext = kwargs.get("trace_ctx") or ensure_trace(
                component, stage, feature
            )

            timer = start_timer()

            logger.info("span_start", extra=bind_trace(logger, ctx))

            try:
                result = await fn(*args, **kwargs)

                logger.info(
                    "span_end",
                    extra=bind_trace(logger, ctx, {"duration_ms": timer.elapsed_ms})
                )

                return result

            except DocPubError as e:
                logger.error(
                    "span_error",
                    extra=bind_trace(
                        logger,
                        ctx,
                        {
                            "duration_ms": timer.elapsed_ms,
                            "ka_code": e.code,
                            "http_status": e.http_status,
                        },
                    ),
                )
                raise

            except Exception:
                logger.exception(
                    "span_exception",
                    extra=bind_trace(logger, ctx, {"duration_ms": timer.elapsed_ms}),
                )
                raise

        return wrapper

    return decorator
