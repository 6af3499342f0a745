r"""Default values shared by the retry executors and classifiers.

This module gathers the configuration constants used when a caller does
not override them.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "RETRY_STATUS_CODES",
]

# Default wait in seconds between a transient failure and the next attempt
# The interval is fixed: it does not grow with the attempt number
DEFAULT_INTERVAL = 2.0

# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# HTTP status codes that the httpx classifier treats as transient
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
