r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a coroutine
function with automatic retry logic, suspending the awaiting task
between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.core.validation import validate_callable
from aretry.retry.decider import RetryDecider, Transient
from aretry.retry.executor_core import (
    notify_retry,
    raise_fatal,
    raise_out_of_retries,
    should_wait,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes asynchronous work with automatic retry logic.

    This class implements the same attempt loop as ``RetryExecutor`` but
    awaits the work and waits with ``asyncio.sleep()``, so other tasks
    keep running on the event loop during the wait.

    Cancellation is native: cancelling the task awaiting ``execute``
    raises ``asyncio.CancelledError`` from the current attempt or wait.
    ``CancelledError`` is not an ``Exception`` subclass, so it is never
    recorded in the failure history nor passed to the classifier.

    Attributes:
        config: Retry configuration containing the classifier, interval,
            maximum number of attempts and observer.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import AsyncRetryExecutor, RetryConfig
        >>> async def work():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(classifier=lambda exc: True))
        >>> asyncio.run(executor.execute(work))
        42

        ```
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.decider: RetryDecider = RetryDecider(retry_config.classifier)

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """Execute the async work with automatic retry logic.

        The work is attempted up to ``max_attempts`` times. Transient
        failures are reported to the observer and followed by an
        ``asyncio.sleep`` of ``interval`` seconds, except after the
        final attempt. A fatal failure ends the session immediately.

        Note:
            The observer is called synchronously on the awaiting task,
            so it should be a fast operation.

        Args:
            work: Zero-argument callable returning an awaitable, usually
                a coroutine function. A new awaitable is created for each
                attempt.

        Returns:
            The result of the first successful attempt.

        Raises:
            ValueError: If ``work`` is ``None``.
            TypeError: If ``work`` is not callable, or returns something
                that cannot be awaited. Such a result is not a failure of
                the work, so it is raised without being classified.
            OutOfRetriesError: If every attempt failed with a transient
                failure, or if ``max_attempts <= 0``.
            NonTransientError: If a fatal failure follows one or more
                transient failures.
            Exception: The original failure if the first attempt fails
                with a fatal failure.
        """
        validate_callable(work, "work")
        errors: list[Exception] = []
        max_attempts = self.config.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                pending = work()
                awaitable = inspect.isawaitable(pending)
                if awaitable:
                    result = await pending
            except Exception as exc:
                errors.append(exc)
                logger.debug(
                    f"Attempt {attempt}/{max_attempts} failed with {type(exc).__name__}: {exc}"
                )
            else:
                if not awaitable:
                    msg = f"work must return an awaitable, got {type(pending).__name__}"
                    raise TypeError(msg)
                logger.debug(f"Attempt {attempt}/{max_attempts} succeeded")
                return result

            decision = self.decider.decide(errors)
            if not isinstance(decision, Transient):
                raise_fatal(decision)

            notify_retry(self.config.on_retry, attempt, errors[-1])
            if should_wait(attempt, max_attempts):
                logger.debug(f"Waiting {self.config.interval:.2f}s before retry")
                await asyncio.sleep(self.config.interval)

        raise_out_of_retries(errors, max_attempts)
