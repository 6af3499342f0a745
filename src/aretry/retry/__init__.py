r"""Retry package implementing the attempt loop and its building blocks.

Public API:
    - RetryConfig: Configuration for retry behavior
    - RetryDecider: Logic for classifying the failure history
    - Transient, FatalSingle, FatalAggregate: Decisions returned by the decider
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "FatalAggregate",
    "FatalSingle",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
    "Transient",
]

from aretry.retry.config import RetryConfig
from aretry.retry.decider import FatalAggregate, FatalSingle, RetryDecider, Transient
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
