r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors. They encapsulate the terminal paths of
the attempt loop and the observer invocation.
"""

from __future__ import annotations

__all__ = [
    "notify_retry",
    "raise_fatal",
    "raise_out_of_retries",
    "should_wait",
]

import logging
from typing import TYPE_CHECKING, NoReturn

from aretry.exceptions import OutOfRetriesError
from aretry.retry.decider import FatalSingle

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretry.retry.decider import FatalAggregate

logger: logging.Logger = logging.getLogger(__name__)


def notify_retry(
    on_retry: Callable[[int, Exception], None] | None, attempt: int, error: Exception
) -> None:
    """Invoke the retry observer if provided.

    Exceptions raised by the observer are not caught.

    Args:
        on_retry: Optional observer.
        attempt: The attempt that failed (1-indexed).
        error: The transient failure.
    """
    if on_retry is not None:
        on_retry(attempt, error)


def should_wait(attempt: int, max_attempts: int) -> bool:
    """Indicate if the executor must wait before the next attempt.

    No wait follows the final attempt.

    Args:
        attempt: The attempt that failed (1-indexed).
        max_attempts: Maximum number of attempts.

    Returns:
        ``True`` if another attempt remains, otherwise ``False``.

    Example:
        ```pycon
        >>> from aretry.retry.executor_core import should_wait
        >>> should_wait(attempt=1, max_attempts=3)
        True
        >>> should_wait(attempt=3, max_attempts=3)
        False

        ```
    """
    return attempt < max_attempts


def raise_fatal(decision: FatalSingle | FatalAggregate) -> NoReturn:
    """Raise the exception that ends a session on a fatal failure.

    A single fatal failure is re-raised as the original exception object.
    A fatal failure following transient ones raises ``NonTransientError``
    chained to that failure.

    Args:
        decision: The fatal decision returned by the decider.

    Raises:
        Exception: The original failure or a ``NonTransientError``.
    """
    if isinstance(decision, FatalSingle):
        logger.debug(f"Re-raising non-transient {type(decision.error).__name__} on first attempt")
        raise decision.error
    logger.debug(f"Non-transient failure after {len(decision.errors)} attempts")
    raise decision.to_exception() from decision.errors[-1]


def raise_out_of_retries(errors: Sequence[Exception], max_attempts: int) -> NoReturn:
    """Raise the error signaling that the attempt budget is exhausted.

    Args:
        errors: The failure history, oldest first. Empty when no attempt
            was made.
        max_attempts: Maximum number of attempts.

    Raises:
        OutOfRetriesError: Always, wrapping ``errors``.
    """
    logger.debug(f"Retry ran out of attempts ({len(errors)}/{max(max_attempts, 0)} failed)")
    error = OutOfRetriesError(errors)
    if errors:
        raise error from errors[-1]
    raise error
