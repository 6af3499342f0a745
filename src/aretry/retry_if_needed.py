r"""Contains the function that runs synchronous work with automatic
retry logic."""

from __future__ import annotations

__all__ = ["retry_if_needed"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from aretry.retry import RetryConfig, RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def retry_if_needed(
    work: Callable[[], T],
    classifier: Callable[[Exception], bool],
    *,
    interval: float = DEFAULT_INTERVAL,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    on_retry: Callable[[int, Exception], None] | None = None,
) -> T:
    """Attempt the work until it succeeds, fails fatally, or runs out of
    attempts.

    The work should be idempotent: a retried attempt must have the same
    net effect as a single one. Work that returns nothing is supported
    and yields ``None``.

    Args:
        work: Zero-argument callable to attempt.
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
            failure. It wraps all the failures in encounter order.
        NonTransientError: If a fatal failure follows one or more
            transient failures. It wraps all the failures.
        Exception: The original failure, unwrapped, if the first attempt
            fails with a fatal failure.

    Example:
        ```pycon
        >>> from aretry import retry_if_needed
        >>> from aretry.classifiers import transient_on
        >>> results = iter([ConnectionError("reset"), "ok"])
        >>> def work():
        ...     result = next(results)
        ...     if isinstance(result, Exception):
        ...         raise result
        ...     return result
        ...
        >>> retry_if_needed(work, transient_on(ConnectionError), interval=0.0)
        'ok'

        ```
    """
    config = RetryConfig(
        classifier=classifier,
        interval=interval,
        max_attempts=max_attempts,
        on_retry=on_retry,
    )
    return RetryExecutor(config).execute(work)
