r"""Parameter validation utilities for repeated assertions.

This module provides validation functions for the retry parameters to
ensure they meet the required constraints before a retry session starts.
Invalid parameters are programming errors, so they are rejected early
instead of silently degrading the retry loop.
"""

from __future__ import annotations

__all__ = [
    "normalize_interval",
    "validate_catch_params",
    "validate_retry_on",
    "validate_retry_params",
]

import math
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def normalize_interval(interval: float | timedelta) -> float:
    """Convert an interval to a number of seconds.

    Args:
        interval: The delay between two attempts, either in seconds or
            as a ``datetime.timedelta``.

    Returns:
        The interval in seconds.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from repeated_assert.core.validation import normalize_interval
        >>> normalize_interval(0.5)
        0.5
        >>> normalize_interval(timedelta(milliseconds=50))
        0.05

        ```
    """
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


def validate_retry_params(max_attempts: int, interval: float | timedelta) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Maximum number of evaluations of the condition.
            Must be an integer >= 1.
        interval: Delay between two attempts. Must be finite and >= 0.

    Raises:
        ValueError: If max_attempts is not a positive integer or if
            interval is negative or not finite.

    Example:
        ```pycon
        >>> from repeated_assert.core import validate_retry_params
        >>> validate_retry_params(max_attempts=3, interval=0.1)
        >>> validate_retry_params(max_attempts=0, interval=0.1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise ValueError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    seconds = normalize_interval(interval)
    if not math.isfinite(seconds):
        msg = f"interval must be finite, got {interval}"
        raise ValueError(msg)
    if seconds < 0:
        msg = f"interval must be >= 0, got {interval}"
        raise ValueError(msg)


def validate_catch_params(
    catch_after: int | None,
    recovery: Callable[[], object] | None,
    max_attempts: int,
) -> None:
    """Validate the parameters of the catch coordinator.

    Args:
        catch_after: The failing attempt index that triggers the recovery
            action, or ``None`` to disable it. Must be in
            ``[1, max_attempts]``.
        recovery: The recovery action, or ``None``. Must be given if and
            only if ``catch_after`` is given.
        max_attempts: Maximum number of evaluations of the condition.

    Raises:
        ValueError: If only one of catch_after and recovery is given, or
            if catch_after is outside ``[1, max_attempts]``.
        TypeError: If recovery is not callable.

    Example:
        ```pycon
        >>> from repeated_assert.core import validate_catch_params
        >>> validate_catch_params(catch_after=None, recovery=None, max_attempts=3)
        >>> validate_catch_params(catch_after=2, recovery=print, max_attempts=3)

        ```
    """
    if catch_after is None and recovery is None:
        return
    if catch_after is None or recovery is None:
        msg = "catch_after and recovery must be provided together"
        raise ValueError(msg)
    if not callable(recovery):
        msg = f"recovery must be callable, got {type(recovery).__name__}"
        raise TypeError(msg)
    if isinstance(catch_after, bool) or not isinstance(catch_after, int):
        msg = f"catch_after must be an int, got {type(catch_after).__name__}"
        raise ValueError(msg)
    if catch_after < 1 or catch_after > max_attempts:
        msg = f"catch_after must be in [1, {max_attempts}], got {catch_after}"
        raise ValueError(msg)


def validate_retry_on(retry_on: tuple[type[Exception], ...]) -> None:
    """Validate the exception types treated as attempt failures.

    Args:
        retry_on: Non-empty tuple of ``Exception`` subclasses.

    Raises:
        ValueError: If retry_on is empty or contains something that is
            not an ``Exception`` subclass.
    """
    if not isinstance(retry_on, tuple) or not retry_on:
        msg = f"retry_on must be a non-empty tuple of exception types, got {retry_on!r}"
        raise ValueError(msg)
    for exc_type in retry_on:
        if not isinstance(exc_type, type) or not issubclass(exc_type, Exception):
            msg = f"retry_on must only contain Exception subclasses, got {exc_type!r}"
            raise ValueError(msg)
