r"""Contains the function that runs asynchronous work with automatic
retry logic."""

from __future__ import annotations

__all__ = ["retry_if_needed_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from aretry.retry import AsyncRetryExecutor, RetryConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


async def retry_if_needed_async(
    work: Callable[[], Awaitable[T]],
    classifier: Callable[[Exception], bool],
    *,
    interval: float = DEFAULT_INTERVAL,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    on_retry: Callable[[int, Exception], None] | None = None,
) -> T:
    """Attempt the async work until it succeeds, fails fatally, or runs
    out of attempts.

    This function is the asynchronous counterpart of
    ``retry_if_needed``. The wait between attempts uses
    ``asyncio.sleep()`` and never blocks the event loop.

    Args:
        work: Zero-argument callable returning an awaitable, for example
            a coroutine function or ``functools.partial`` of one.
        classifier: Predicate called with the most recent failure. It
            returns ``True`` if the failure is transient.
        interval: Seconds to wait between a transient failure and the
            next attempt. Must be >= 0.
        max_attempts: Maximum number of attempts, including the first
            one. A value <= 0 means that no attempt is made.
        on_retry: Optional observer called with the 1-based attempt
            number and the failure after each transient failure, before
            the wait. Its exceptions propagate and end the session.

    Returns:
        The result of the first successful attempt.

    Raises:
        ValueError: If ``work`` or ``classifier`` is ``None``, or if
            ``interval`` is negative. Raised before any attempt.
        OutOfRetriesError: If every attempt failed with a transient
            failure.
        NonTransientError: If a fatal failure follows one or more
            transient failures.
        Exception: The original failure, unwrapped, if the first attempt
            fails with a fatal failure.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretry import retry_if_needed_async
        >>> from aretry.classifiers import is_transient_http_error
        >>> async def fetch():
        ...     async with httpx.AsyncClient() as client:
        ...         response = await client.get("https://api.example.com/time")
        ...         return response.raise_for_status().json()
        ...
        >>> asyncio.run(retry_if_needed_async(fetch, is_transient_http_error))  # doctest: +SKIP

        ```
    """
    config = RetryConfig(
        classifier=classifier,
        interval=interval,
        max_attempts=max_attempts,
        on_retry=on_retry,
    )
    return await AsyncRetryExecutor(config).execute(work)
