r"""Asynchronous repeated assertions.

This module provides the cooperative counterparts of ``retry`` and
``retry_with_catch``. The condition and the recovery action may be
coroutine functions, and the delay between attempts suspends with
``asyncio.sleep`` instead of blocking the thread.
"""

from __future__ import annotations

__all__ = ["retry_async", "retry_with_catch_async"]

from typing import TYPE_CHECKING, Any

from repeated_assert.repeat import build_config
from repeated_assert.retry import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from repeated_assert.core.config import RetryConfig


async def retry_async(
    condition: Callable[[], Any],
    *,
    max_attempts: int | None = None,
    interval: float | timedelta | None = None,
    retry_on: tuple[type[Exception], ...] | None = None,
    config: RetryConfig | None = None,
) -> Any:
    """Evaluate a condition until it passes or the attempts run out.

    Same semantics as ``retry``, but each attempt and each delay are
    awaited. Attempts never overlap.

    Args:
        condition: Zero-argument coroutine function or plain callable.
        max_attempts: Maximum number of evaluations.
        interval: Delay between attempts.
        retry_on: Exception types that count as a failed attempt.
        config: Optional base configuration.

    Returns:
        The value produced by the first passing attempt.

    Raises:
        ValueError: If the configuration is invalid.
        Exception: The exception raised by the last attempt, unchanged,
            if no attempt passed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from repeated_assert import retry_async
        >>> async def condition():
        ...     return 42
        ...
        >>> asyncio.run(retry_async(condition, max_attempts=3, interval=0.0))
        42

        ```
    """
    config = build_config(config, max_attempts=max_attempts, interval=interval, retry_on=retry_on)
    return await AsyncRetryExecutor(config).execute(condition)


async def retry_with_catch_async(
    condition: Callable[[], Any],
    *,
    catch_after: int,
    recovery: Callable[[], Any],
    max_attempts: int | None = None,
    interval: float | timedelta | None = None,
    retry_on: tuple[type[Exception], ...] | None = None,
    config: RetryConfig | None = None,
) -> Any:
    """Evaluate a condition repeatedly and run a recovery action once
    after ``catch_after`` failed attempts.

    Same semantics as ``retry_with_catch``. The recovery action may be a
    coroutine function, in which case it is awaited before the delay
    preceding the next attempt.

    Args:
        condition: Zero-argument coroutine function or plain callable.
        catch_after: Failing attempt index that triggers the recovery
            action.
        recovery: Zero-argument coroutine function or plain callable.
        max_attempts: Maximum number of evaluations.
        interval: Delay between attempts.
        retry_on: Exception types that count as a failed attempt.
        config: Optional base configuration.

    Returns:
        The value produced by the first passing attempt.

    Raises:
        ValueError: If the configuration is invalid.
        Exception: The exception raised by the last attempt, or by the
            recovery action.
    """
    config = build_config(
        config,
        max_attempts=max_attempts,
        interval=interval,
        catch_after=catch_after,
        recovery=recovery,
        retry_on=retry_on,
    )
    return await AsyncRetryExecutor(config).execute(condition)
