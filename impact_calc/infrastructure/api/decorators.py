import asyncio
import httpx
from functools import wraps
from impact_calc.logging_config import get_logger
from impact_calc.domain.exceptions import RateLimitException, TransientAPIException

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS = (
    RateLimitException,
    TransientAPIException,
    httpx.TimeoutException,
    httpx.ConnectError,
    httpx.ProxyError,
    httpx.NetworkError,
    asyncio.TimeoutError,
)


def async_retry(max_retries=3, backoff_factor=0.5, initial_timeout=10.0, max_timeout=30.0):
    """
    Decorator for retrying async functions with exponential backoff.

    Retries rate limiting, transient server errors and network failures.
    Authentication and malformed-response errors propagate immediately.
    Increases timeout on each retry to handle slow connections.
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(max_retries):
                try:
                    timeout = min(initial_timeout * (2 ** attempt), max_timeout)
                    kwargs['timeout'] = timeout

                    logger.info(f"Attempt {attempt + 1}/{max_retries} with timeout {timeout:.1f}s for {func.__name__}")

                    return await func(*args, **kwargs)
                except RETRYABLE_EXCEPTIONS as e:
                    error_type = type(e).__name__

                    if attempt < max_retries - 1:
                        delay = backoff_factor * (2 ** attempt)
                        logger.warning(
                            f"{error_type} in {func.__name__}: {e}. "
                            f"Retrying in {delay:.2f}s (attempt {attempt + 1}/{max_retries})..."
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error(
                            f"All {max_retries} retry attempts for {func.__name__} failed. "
                            f"Last error: {error_type}: {e}"
                        )
                        raise
            raise ValueError(f"max_retries must be positive, got {max_retries}")
        return wrapper
    return decorator
