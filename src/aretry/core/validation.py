r"""Parameter validation utilities for the retry executors.

This module provides validation functions that reject invalid
configuration before the first attempt is made.
"""

from __future__ import annotations

__all__ = ["validate_callable", "validate_required", "validate_retry_params"]

import math
from typing import Any


def validate_required(value: Any, name: str) -> None:
    """Validate that a required argument was supplied.

    Args:
        value: The argument value.
        name: The argument name, used in the error message.

    Raises:
        ValueError: If ``value`` is ``None``.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_required
        >>> validate_required(print, "work")
        >>> validate_required(None, "work")
        Traceback (most recent call last):
        ...
        ValueError: work is required

        ```
    """
    if value is None:
        msg = f"{name} is required"
        raise ValueError(msg)


def validate_callable(value: Any, name: str) -> None:
    """Validate that a required argument was supplied and is callable.

    Args:
        value: The argument value.
        name: The argument name, used in the error messages.

    Raises:
        ValueError: If ``value`` is ``None``.
        TypeError: If ``value`` is not callable.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_callable
        >>> validate_callable(print, "work")
        >>> validate_callable(42, "work")
        Traceback (most recent call last):
        ...
        TypeError: work must be callable, got int

        ```
    """
    validate_required(value, name)
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)


def validate_retry_params(interval: float, max_attempts: int) -> None:
    """Validate retry parameters.

    Args:
        interval: Seconds to wait between attempts. Must be a finite
            number >= 0.
        max_attempts: Maximum number of attempts. Any integer is accepted;
            a value <= 0 means that no attempt is made.

    Raises:
        ValueError: If ``interval`` is negative, NaN or infinite.
        TypeError: If ``max_attempts`` is not an integer.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retry_params
        >>> validate_retry_params(interval=2.0, max_attempts=3)
        >>> validate_retry_params(interval=0.0, max_attempts=0)
        >>> validate_retry_params(interval=-1.0, max_attempts=3)
        Traceback (most recent call last):
        ...
        ValueError: interval must be a finite number >= 0, got -1.0

        ```
    """
    if not math.isfinite(interval) or interval < 0:
        msg = f"interval must be a finite number >= 0, got {interval}"
        raise ValueError(msg)
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise TypeError(msg)
