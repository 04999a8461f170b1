"""
Common decorators for retrying outbound operations.
"""

from __future__ import annotations

import asyncio
import functools
import random
from typing import Any, Callable, Optional, TypeVar

from common.docpub_common.config import settings
from common.docpub_common.logging.logger import get_logger
from common.docpub_common.utils.exceptions import DocPubError

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger("docpub.retry")


def backoff_delay_ms(attempt: int, base_delay_ms: int, max_delay_ms: int) -> float:
    """Exponential delay for the given 1-based attempt, with +/-20% jitter."""
    delay = min(max_delay_ms, base_delay_ms * (2 ** (attempt - 1)))
    return delay * (0.8 + random.random() * 0.4)


def retry_with_backoff(
    retries: Optional[int] = None,
    base_delay_ms: Optional[int] = None,
    max_delay_ms: Optional[int] = None,
) -> Callable[[F], F]:
    """
    Decorator for async functions to retry on retriable DocPubError.

    Unset limits fall back to HTTP_RETRIES / HTTP_BACKOFF_* at call time.

    Intended for:
    - Docs batchUpdate 429 / 5xx
    - Drive listing 429 / 5xx
    - network failures reaching Google
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            max_retries = settings.HTTP_RETRIES if retries is None else retries
            base = settings.HTTP_BACKOFF_BASE_MS if base_delay_ms is None else base_delay_ms
            cap = settings.HTTP_BACKOFF_MAX_MS if max_delay_ms is None else max_delay_ms

            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except DocPubError as e:
                    attempt += 1
                    if not e.retriable or attempt > max_retries:
                        raise
                    delay = backoff_delay_ms(attempt, base, cap)
                    logger.warning(
                        "%s failed on attempt %d (%s), retrying in %.0f ms",
                        func.__qualname__,
                        attempt,
                        e.code,
                        delay,
                        extra={"ka_code": e.code},
                    )
                    await asyncio.sleep(delay / 1000.0)

        return async_wrapper  # type: ignore[misc]

    return decorator
