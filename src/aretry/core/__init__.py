r"""Core shared configuration and validation for sync and async
executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "RETRY_STATUS_CODES",
    "validate_callable",
    "validate_required",
    "validate_retry_params",
]

from aretry.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS, RETRY_STATUS_CODES
from aretry.core.validation import (
    validate_callable,
    validate_required,
    validate_retry_params,
)
