r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a unit of work
with automatic retry logic, blocking the calling thread between
attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
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
    from collections.abc import Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a unit of work with automatic retry logic.

    This class implements the attempt loop for synchronous work. Each
    call to ``execute`` starts a new session with its own failure history
    and attempt counter, so one executor can be shared between threads.

    Attributes:
        config: Retry configuration containing the classifier, interval,
            maximum number of attempts and observer.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(classifier=lambda exc: True))
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.decider: RetryDecider = RetryDecider(retry_config.classifier)

    def execute(self, work: Callable[[], T]) -> T:
        """Execute the work with automatic retry logic.

        The work is attempted up to ``max_attempts`` times. Transient
        failures are reported to the observer and followed by a
        ``time.sleep`` of ``interval`` seconds, except after the final
        attempt. A fatal failure ends the session immediately.

        Args:
            work: Zero-argument callable to attempt. Its return value is
                returned on success.

        Returns:
            The result of the first successful attempt.

        Raises:
            ValueError: If ``work`` is ``None``.
            TypeError: If ``work`` is not callable.
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
                result = work()
            except Exception as exc:
                errors.append(exc)
                logger.debug(
                    f"Attempt {attempt}/{max_attempts} failed with {type(exc).__name__}: {exc}"
                )
            else:
                logger.debug(f"Attempt {attempt}/{max_attempts} succeeded")
                return result

            decision = self.decider.decide(errors)
            if not isinstance(decision, Transient):
                raise_fatal(decision)

            notify_retry(self.config.on_retry, attempt, errors[-1])
            if should_wait(attempt, max_attempts):
                logger.debug(f"Waiting {self.config.interval:.2f}s before retry")
                time.sleep(self.config.interval)

        raise_out_of_retries(errors, max_attempts)
