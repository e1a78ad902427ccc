r"""Blocking repeated assertions.

This module provides the functional entry points that evaluate a
condition repeatedly on the calling thread, sleeping a fixed interval
between attempts.
"""

from __future__ import annotations

__all__ = ["build_config", "retry", "retry_with_catch"]

from typing import TYPE_CHECKING, Any, TypeVar

from repeated_assert.core.config import RetryConfig
from repeated_assert.retry import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

T = TypeVar("T")


def build_config(config: RetryConfig | None = None, **overrides: Any) -> RetryConfig:
    """Merge keyword overrides into a configuration.

    Args:
        config: Optional base configuration. Defaults to ``RetryConfig()``.
        **overrides: Options that replace the base configuration when
            they are not ``None``.

    Returns:
        A validated configuration.
    """
    return (config or RetryConfig()).merge(**overrides)


def retry(
    condition: Callable[[], T],
    *,
    max_attempts: int | None = None,
    interval: float | timedelta | None = None,
    retry_on: tuple[type[Exception], ...] | None = None,
    config: RetryConfig | None = None,
) -> T:
    """Evaluate a condition until it passes or the attempts run out.

    The calling thread is blocked during each evaluation and during the
    ``time.sleep`` between two attempts. Nothing is slept before the
    first attempt, after a passing attempt or after the last attempt.

    Args:
        condition: Zero-argument callable. It passes when it returns and
            fails when it raises (for example with ``assert``).
        max_attempts: Maximum number of evaluations. Defaults to
            ``config.max_attempts``.
        interval: Delay in seconds (or ``timedelta``) between attempts.
            Defaults to ``config.interval``.
        retry_on: Exception types that count as a failed attempt.
            Defaults to ``config.retry_on``.
        config: Optional base configuration.

    Returns:
        The value returned by the first passing attempt.

    Raises:
        ValueError: If the configuration is invalid.
        Exception: The exception raised by the last attempt, unchanged,
            if no attempt passed.

    Example:
        ```pycon
        >>> from repeated_assert import retry
        >>> state = {"count": 0}
        >>> def condition():
        ...     state["count"] += 1
        ...     assert state["count"] == 3, f"expected 3 got {state['count']}"
        ...     return state["count"]
        ...
        >>> retry(condition, max_attempts=5, interval=0.0)
        3

        ```
    """
    config = build_config(config, max_attempts=max_attempts, interval=interval, retry_on=retry_on)
    return RetryExecutor(config).execute(condition)


def retry_with_catch(
    condition: Callable[[], T],
    *,
    catch_after: int,
    recovery: Callable[[], Any],
    max_attempts: int | None = None,
    interval: float | timedelta | None = None,
    retry_on: tuple[type[Exception], ...] | None = None,
    config: RetryConfig | None = None,
) -> T:
    """Evaluate a condition repeatedly and run a recovery action once
    after ``catch_after`` failed attempts.

    The recovery action runs right after the attempt whose index equals
    ``catch_after`` failed, before the sleep preceding the next attempt.
    It never runs if the condition passes on or before that attempt.
    This is useful to poke an unreliable service the tested code relies
    on, without changing which attempts pass or fail.

    Args:
        condition: Zero-argument callable under retry.
        catch_after: Failing attempt index that triggers the recovery
            action. Must be in ``[1, max_attempts]``.
        recovery: Zero-argument callable run at most once. Its errors
            propagate and end the session.
        max_attempts: Maximum number of evaluations.
        interval: Delay between attempts.
        retry_on: Exception types that count as a failed attempt.
        config: Optional base configuration.

    Returns:
        The value returned by the first passing attempt.

    Raises:
        ValueError: If the configuration is invalid.
        Exception: The exception raised by the last attempt, or by the
            recovery action.

    Example:
        ```pycon
        >>> from repeated_assert import retry_with_catch
        >>> service = {"up": False}
        >>> def condition():
        ...     assert service["up"], "service is down"
        ...     return "up"
        ...
        >>> retry_with_catch(
        ...     condition,
        ...     catch_after=2,
        ...     recovery=lambda: service.update(up=True),
        ...     max_attempts=5,
        ...     interval=0.0,
        ... )
        'up'

        ```
    """
    config = build_config(
        config,
        max_attempts=max_attempts,
        interval=interval,
        catch_after=catch_after,
        recovery=recovery,
        retry_on=retry_on,
    )
    return RetryExecutor(config).execute(condition)
