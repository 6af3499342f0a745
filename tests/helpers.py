r"""Shared test helpers for the retry executor tests."""

from __future__ import annotations


class TransientError(Exception):
    r"""Failure that ``is_transient`` judges safe to retry."""


class FatalError(Exception):
    r"""Failure that ``is_transient`` judges unsafe to retry."""


def is_transient(exc: Exception) -> bool:
    return isinstance(exc, TransientError)


def always_transient(exc: Exception) -> bool:  # noqa: ARG001
    return True


def never_transient(exc: Exception) -> bool:  # noqa: ARG001
    return False
