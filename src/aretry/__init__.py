r"""aretry - Retry idempotent work that fails with transient errors.

This package runs a unit of work, synchronous or asynchronous, and
retries it when it fails with an error that a caller-supplied classifier
judges transient. A fatal error ends the session at once; an exhausted
attempt budget raises ``OutOfRetriesError`` with every failure observed.

Key Features:
    - One attempt loop shared by sync and async entry points
    - Caller-supplied classifier, applied to the most recent failure
    - Fixed interval between attempts (2 seconds by default)
    - The original exception is raised unchanged when the first attempt is fatal
    - Full failure history attached to ``OutOfRetriesError`` and ``NonTransientError``
    - Optional observer called on every transient failure
    - Ready-made classifiers, including one for httpx errors

Example:
    ```pycon
    >>> from aretry import retry_if_needed
    >>> from aretry.classifiers import transient_on
    >>> retry_if_needed(lambda: "done", transient_on(ConnectionError))
    'done'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "NonTransientError",
    "OutOfRetriesError",
    "RetryError",
    "__version__",
    "retry_if_needed",
    "retry_if_needed_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS
from aretry.exceptions import NonTransientError, OutOfRetriesError, RetryError
from aretry.retry_if_needed import retry_if_needed
from aretry.retry_if_needed_async import retry_if_needed_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
