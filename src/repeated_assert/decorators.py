r"""Decorator form of the repeated assertions.

Example:
    ```pycon
    >>> from repeated_assert import repeated
    >>> attempts = []
    >>> @repeated(max_attempts=3, interval=0.0)
    ... def wait_for(expected):
    ...     attempts.append(expected)
    ...     assert len(attempts) == expected
    ...     return len(attempts)
    ...
    >>> wait_for(2)
    2

    ```
"""

from __future__ import annotations

__all__ = ["repeated"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from repeated_assert.repeat import build_config
from repeated_assert.retry import AsyncRetryExecutor, RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from repeated_assert.core.config import RetryConfig


def repeated(
    *,
    max_attempts: int | None = None,
    interval: float | timedelta | None = None,
    catch_after: int | None = None,
    recovery: Callable[[], Any] | None = None,
    retry_on: tuple[type[Exception], ...] | None = None,
    config: RetryConfig | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Create a decorator that retries the decorated function.

    The configuration is validated when the decorator is created. Each
    call of the decorated function starts a new session and forwards its
    arguments to every attempt. ``async def`` functions are driven by
    ``AsyncRetryExecutor`` and stay awaitable.

    Args:
        max_attempts: Maximum number of evaluations per call.
        interval: Delay between attempts.
        catch_after: Optional failing attempt index that triggers recovery.
        recovery: Optional one-shot recovery action.
        retry_on: Exception types that count as a failed attempt.
        config: Optional base configuration.

    Returns:
        The decorator.

    Raises:
        ValueError: If the configuration is invalid.
    """
    retry_config = build_config(
        config,
        max_attempts=max_attempts,
        interval=interval,
        catch_after=catch_after,
        recovery=recovery,
        retry_on=retry_on,
    )

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                executor = AsyncRetryExecutor(retry_config)
                return await executor.execute(functools.partial(func, *args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return RetryExecutor(retry_config).execute(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator
