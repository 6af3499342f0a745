r"""Retry decision logic for classifying failures.

This module provides the RetryDecider class that applies the caller's
classifier to the failure history and returns a tagged decision:
``Transient``, ``FatalSingle`` or ``FatalAggregate``. The executors turn
fatal decisions into raised exceptions.
"""

from __future__ import annotations

__all__ = ["Decision", "FatalAggregate", "FatalSingle", "RetryDecider", "Transient"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from aretry.exceptions import NonTransientError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transient:
    """The most recent failure is safe to retry."""


@dataclass(frozen=True)
class FatalSingle:
    """The first and only failure is fatal.

    Attributes:
        error: The failure, re-raised unchanged by the executors.
    """

    error: Exception


@dataclass(frozen=True)
class FatalAggregate:
    """A fatal failure followed one or more transient failures.

    Attributes:
        errors: The whole failure history, oldest first.
    """

    errors: tuple[Exception, ...]

    def to_exception(self) -> NonTransientError:
        return NonTransientError(self.errors)


Decision = Union[Transient, FatalSingle, FatalAggregate]


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        classifier: Predicate returning ``True`` for transient failures.

    Example:
        ```pycon
        >>> from aretry.retry.decider import RetryDecider
        >>> decider = RetryDecider(lambda exc: isinstance(exc, TimeoutError))
        >>> decider.decide([TimeoutError("slow")])
        Transient()
        >>> decider.decide([KeyError("missing")])
        FatalSingle(error=KeyError('missing'))

        ```
    """

    def __init__(self, classifier: Callable[[Exception], bool]) -> None:
        self.classifier = classifier

    def decide(self, errors: Sequence[Exception]) -> Decision:
        """Classify the failure history.

        Only the most recent failure is passed to the classifier. If the
        classifier raises, its exception propagates unchanged.

        Args:
            errors: The failure history, oldest first. Must not be empty.

        Returns:
            ``Transient()`` if the last failure is transient,
            ``FatalSingle`` if it is fatal and the only failure, and
            ``FatalAggregate`` wrapping the whole history otherwise.

        Raises:
            ValueError: If ``errors`` is empty.
        """
        if not errors:
            msg = "cannot classify an empty failure history"
            raise ValueError(msg)
        last_error = errors[-1]
        if self.classifier(last_error):
            return Transient()

        logger.debug(
            f"{type(last_error).__name__} classified as non-transient "
            f"after {len(errors)} failure(s)"
        )
        if len(errors) == 1:
            return FatalSingle(last_error)
        return FatalAggregate(tuple(errors))
