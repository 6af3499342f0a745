r"""Unit tests for the asynchronous retry_if_needed_async entry
point."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import NonTransientError, OutOfRetriesError, retry_if_needed_async
from tests.helpers import FatalError, TransientError, always_transient, is_transient


@pytest.mark.asyncio
async def test_retry_if_needed_async_success(mock_asleep: Mock) -> None:
    work = AsyncMock(return_value="now")

    assert await retry_if_needed_async(work, is_transient) == "now"
    work.assert_awaited_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_retry_if_needed_async_fail_then_succeed(mock_asleep: Mock) -> None:
    work = AsyncMock(side_effect=[TransientError("1"), "attempt 2"])

    assert await retry_if_needed_async(work, is_transient, max_attempts=3) == "attempt 2"
    assert work.await_count == 2
    mock_asleep.assert_awaited_once_with(2.0)


@pytest.mark.asyncio
async def test_retry_if_needed_async_out_of_retries(mock_asleep: Mock) -> None:
    errors = [TransientError("1"), TransientError("2"), TransientError("3")]
    work = AsyncMock(side_effect=errors)

    with pytest.raises(OutOfRetriesError) as exc_info:
        await retry_if_needed_async(work, always_transient, interval=0.1)

    assert exc_info.value.errors == tuple(errors)
    assert mock_asleep.await_args_list == [call(0.1), call(0.1)]


@pytest.mark.asyncio
async def test_retry_if_needed_async_fatal_is_unwrapped(mock_asleep: Mock) -> None:
    error = FatalError("broken")

    with pytest.raises(FatalError) as exc_info:
        await retry_if_needed_async(AsyncMock(side_effect=error), is_transient)

    assert exc_info.value is error
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_retry_if_needed_async_transient_then_fatal(mock_asleep: Mock) -> None:
    work = AsyncMock(side_effect=[TransientError("1"), FatalError("2")])

    with pytest.raises(NonTransientError) as exc_info:
        await retry_if_needed_async(work, is_transient)

    assert len(exc_info.value.errors) == 2
    mock_asleep.assert_awaited_once()


@pytest.mark.asyncio
async def test_retry_if_needed_async_on_retry(mock_asleep: Mock, mock_callback: Mock) -> None:
    first = TransientError("1")
    second = TransientError("2")
    work = AsyncMock(side_effect=[first, second, "ok"])

    assert await retry_if_needed_async(work, is_transient, on_retry=mock_callback) == "ok"
    assert mock_callback.call_args_list == [call(1, first), call(2, second)]
    assert mock_asleep.await_count == 2


@pytest.mark.asyncio
async def test_retry_if_needed_async_max_attempts_negative(mock_asleep: Mock) -> None:
    work = AsyncMock(return_value="never")

    with pytest.raises(OutOfRetriesError) as exc_info:
        await retry_if_needed_async(work, is_transient, max_attempts=-1)

    assert exc_info.value.errors == ()
    work.assert_not_called()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_retry_if_needed_async_work_none() -> None:
    with pytest.raises(ValueError, match=r"work is required"):
        await retry_if_needed_async(None, is_transient)


@pytest.mark.asyncio
async def test_retry_if_needed_async_work_returning_value(mock_asleep: Mock) -> None:
    classifier = Mock(return_value=True)

    with pytest.raises(TypeError, match=r"work must return an awaitable, got str"):
        await retry_if_needed_async(lambda: "sync", classifier)

    classifier.assert_not_called()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_retry_if_needed_async_classifier_none() -> None:
    work = AsyncMock(return_value="never")

    with pytest.raises(ValueError, match=r"classifier is required"):
        await retry_if_needed_async(work, None)

    work.assert_not_called()
