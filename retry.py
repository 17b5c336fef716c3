"""
Retry decorator with exponential backoff.

Used by adapters to handle transient API failures. The flattener itself
never retries: by the time an error reaches it, the adapter has already
given up and converted it to an OutlineError.
"""

import time
from functools import wraps
from typing import TypeVar, Callable, ParamSpec

from logging_config import logger, log_retry
from models import OutlineError, ErrorKind

T = TypeVar("T")
P = ParamSpec("P")


# Exceptions that should trigger retry
RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    ConnectionError,
    TimeoutError,
)

# HTTP status codes that should trigger retry
RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({
    429,  # Rate limited
    500,  # Internal server error
    502,  # Bad gateway
    503,  # Service unavailable
    504,  # Gateway timeout
})


def _get_http_status(exception: Exception) -> int | None:
    """
    Extract HTTP status code from exception if available.

    Works with googleapiclient.errors.HttpError and similar.
    """
    # googleapiclient.errors.HttpError carries resp.status
    if hasattr(exception, "resp") and hasattr(exception.resp, "status"):
        status = exception.resp.status
        if isinstance(status, int):
            return status

    return None


def _should_retry(exception: Exception) -> bool:
    """Determine if an exception is retryable."""
    if isinstance(exception, OutlineError):
        return False

    if isinstance(exception, RETRYABLE_EXCEPTIONS):
        return True

    status = _get_http_status(exception)
    if status is not None and status in RETRYABLE_STATUS_CODES:
        return True

    return False


def _convert_to_outline_error(exception: Exception) -> OutlineError:
    """Convert an exception to an OutlineError if not already one."""
    if isinstance(exception, OutlineError):
        return exception

    # Check HTTP status first (more reliable than string matching)
    status = _get_http_status(exception)
    if status is not None:
        if status == 401:
            return OutlineError(ErrorKind.AUTH_EXPIRED, str(exception))
        elif status == 403:
            return OutlineError(ErrorKind.PERMISSION_DENIED, str(exception))
        elif status == 404:
            return OutlineError(ErrorKind.NOT_FOUND, str(exception))
        elif status == 429:
            return OutlineError(ErrorKind.RATE_LIMITED, str(exception), retryable=True)
        elif status >= 500:
            return OutlineError(ErrorKind.NETWORK_ERROR, str(exception), retryable=True)

    if isinstance(exception, TimeoutError):
        return OutlineError(ErrorKind.TIMEOUT, str(exception), retryable=True)
    if isinstance(exception, ConnectionError):
        return OutlineError(ErrorKind.NETWORK_ERROR, str(exception), retryable=True)

    return OutlineError(ErrorKind.UNKNOWN, str(exception))


def with_retry(
    max_attempts: int = 3,
    delay_ms: int = 1000,
    backoff_multiplier: float = 2.0,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Retry decorator with exponential backoff.

    Args:
        max_attempts: Maximum number of attempts
        delay_ms: Initial delay in milliseconds
        backoff_multiplier: Multiplier for exponential backoff

    Exceptions that survive the last attempt are raised as OutlineError.

    Returns:
        Decorated function with retry logic

    Example:
        @with_retry(max_attempts=3, delay_ms=1000)
        def get_folder(folder_id: str):
            return service.files().get(fileId=folder_id).execute()
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            last_exception: Exception | None = None

            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    last_exception = e

                    if not _should_retry(e) or attempt == max_attempts - 1:
                        logger.error(
                            f"{func.__name__} failed after {attempt + 1} attempts: {e}"
                        )
                        if not isinstance(e, OutlineError):
                            raise _convert_to_outline_error(e) from e
                        raise

                    wait_ms = int(delay_ms * (backoff_multiplier ** attempt))
                    log_retry(attempt + 1, max_attempts, wait_ms, str(e))
                    time.sleep(wait_ms / 1000)

            # Should never reach here, but satisfy type checker
            assert last_exception is not None
            raise _convert_to_outline_error(last_exception) from last_exception

        return wrapper

    return decorator
