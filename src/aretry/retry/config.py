r"""Configuration dataclass for retry behavior.

This module provides the configuration object shared by the synchronous
and asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from aretry.core.validation import validate_callable, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Args:
        classifier: Predicate called with the most recent failure. It
            returns ``True`` if the failure is transient (safe to retry)
            and ``False`` if it is fatal.
        interval: Seconds to wait between a transient failure and the
            next attempt. Must be >= 0.
        max_attempts: Maximum number of attempts, including the first
            one. A value <= 0 means that no attempt is made.
        on_retry: Optional observer called with the 1-based attempt
            number and the failure, after each transient failure and
            before the wait. Exceptions raised by the observer propagate
            and end the retry session.

    Raises:
        ValueError: If ``classifier`` is ``None`` or ``interval`` is
            negative or not finite.
        TypeError: If ``classifier`` is not callable or
            ``max_attempts`` is not an integer.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig
        >>> config = RetryConfig(classifier=lambda exc: isinstance(exc, TimeoutError))
        >>> config.max_attempts
        3
        >>> config.interval
        2.0
        >>> config.merge(max_attempts=5).max_attempts
        5
        >>> config.max_attempts  # Original unchanged
        3

        ```
    """

    classifier: Callable[[Exception], bool]
    interval: float = DEFAULT_INTERVAL
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    on_retry: Callable[[int, Exception], None] | None = None

    def __post_init__(self) -> None:
        validate_callable(self.classifier, "classifier")
        validate_retry_params(interval=self.interval, max_attempts=self.max_attempts)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so optional keyword
        arguments can be forwarded without checking them first.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated ``RetryConfig`` instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

