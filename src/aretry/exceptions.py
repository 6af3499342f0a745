r"""Exception classes raised by the retry executors.

This module defines the error taxonomy of aretry. Configuration errors
are reported with ``ValueError`` before any attempt is made, a single
fatal failure is re-raised unchanged, and the two classes below wrap the
failure history when more context is needed.
"""

from __future__ import annotations

__all__ = ["NonTransientError", "OutOfRetriesError", "RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

OUT_OF_RETRIES_MESSAGE = "Retry ran out of retry attempts."
NON_TRANSIENT_MESSAGE = (
    "Retry encountered a non-transient exception, which the provided classifier "
    "determined was not safe for retry attempts."
)


class RetryError(Exception):
    """Base class for errors that wrap the failure history of a retry
    session.

    Args:
        message: Human-readable error message.
        errors: The failures observed during the session, oldest first.

    Attributes:
        message: Human-readable error message.
        errors: The failures observed during the session, oldest first.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError("boom", errors=[ValueError("a"), KeyError("b")])
        >>> len(error.errors)
        2
        >>> error.last_error
        KeyError('b')

        ```
    """

    def __init__(self, message: str, errors: Sequence[Exception] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.errors: tuple[Exception, ...] = tuple(errors)

    @property
    def last_error(self) -> Exception | None:
        r"""The most recent wrapped failure, or ``None`` if the history is
        empty."""
        if not self.errors:
            return None
        return self.errors[-1]

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(f"{type(err).__name__}: {err}" for err in self.errors)
        return f"{self.message} ({len(self.errors)} failures: {details})"


class OutOfRetriesError(RetryError):
    """Raised when the attempt budget is exhausted and every failure was
    judged transient.

    The wrapped history holds one failure per attempt, in encounter order,
    so ``attempts`` is its length. It is empty when the executor was
    configured with ``max_attempts <= 0``. The default message ends with
    the number of attempts made.

    Example:
        ```pycon
        >>> from aretry.exceptions import OutOfRetriesError
        >>> error = OutOfRetriesError(errors=[TimeoutError("slow")])
        >>> error.message
        'Retry ran out of retry attempts. Attempts made: 1.'
        >>> error.attempts
        1

        ```
    """

    def __init__(self, errors: Sequence[Exception] = (), message: str | None = None) -> None:
        attempts = len(errors)
        super().__init__(message or f"{OUT_OF_RETRIES_MESSAGE} Attempts made: {attempts}.", errors)
        self.attempts = attempts


class NonTransientError(RetryError):
    """Raised when a fatal failure follows one or more transient
    failures.

    A fatal failure on the very first attempt is re-raised as-is instead,
    so this error always wraps at least two failures.
    """

    def __init__(self, errors: Sequence[Exception], message: str | None = None) -> None:
        super().__init__(message or NON_TRANSIENT_MESSAGE, errors)
