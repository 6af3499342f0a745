r"""Ready-made failure classifiers.

A classifier is a plain function that receives a failure and returns
``True`` if it is transient (safe to retry) or ``False`` if it is fatal.
Classifiers are stateless and are passed explicitly to each call, so the
functions below can be shared freely.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry.classifiers import is_transient_http_error, transient_on
    >>> is_transient_http_error(httpx.ConnectTimeout("timed out"))
    True
    >>> is_transient_http_error(ValueError("bad input"))
    False
    >>> classifier = transient_on(TimeoutError, ConnectionError)
    >>> classifier(ConnectionResetError())
    True

    ```
"""

from __future__ import annotations

__all__ = ["is_transient_http_error", "transient_on"]

import logging
from typing import TYPE_CHECKING

import httpx

from aretry.core.config import RETRY_STATUS_CODES
from aretry.exceptions import RetryError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def transient_on(*exception_types: type[Exception]) -> Callable[[Exception], bool]:
    """Create a classifier that judges given exception types transient.

    Args:
        *exception_types: The exception types to retry. Subclasses match
            too.

    Returns:
        A classifier returning ``True`` for instances of any of
        ``exception_types``.

    Raises:
        ValueError: If no exception type is given.

    Example:
        ```pycon
        >>> from aretry.classifiers import transient_on
        >>> classifier = transient_on(TimeoutError)
        >>> classifier(TimeoutError())
        True
        >>> classifier(KeyError("x"))
        False

        ```
    """
    if not exception_types:
        msg = "at least one exception type is required"
        raise ValueError(msg)

    def classifier(exc: Exception) -> bool:
        return isinstance(exc, exception_types)

    return classifier


def is_transient_http_error(
    exc: Exception, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Classify httpx failures.

    The following failures are transient:
    - ``httpx.TimeoutException`` and other ``httpx.TransportError``
      (connection, network and protocol errors)
    - ``httpx.HTTPStatusError`` whose status code is in
      ``status_forcelist`` (429, 500, 502, 503 and 504 by default)
    - ``RetryError`` from a nested retry session whose last wrapped
      failure is transient

    Everything else, including client errors like 404, is fatal.

    Args:
        exc: The failure to classify.
        status_forcelist: HTTP status codes considered transient.

    Returns:
        ``True`` if the failure is transient, otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.classifiers import is_transient_http_error
        >>> request = httpx.Request("GET", "https://api.example.com/time")
        >>> response = httpx.Response(503, request=request)
        >>> error = httpx.HTTPStatusError("unavailable", request=request, response=response)
        >>> is_transient_http_error(error)
        True
        >>> is_transient_http_error(error, status_forcelist=(429,))
        False

        ```
    """
    if isinstance(exc, RetryError):
        if exc.last_error is None:
            return False
        return is_transient_http_error(exc.last_error, status_forcelist)
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        if status_code in status_forcelist:
            return True
        logger.debug(f"Status {status_code} is not in the retryable status codes")
    return False
