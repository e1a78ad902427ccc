r"""Configuration dataclass and defaults for repeated assertions.

This module provides configuration constants and a dataclass-based
configuration object shared by the blocking and the async retry
drivers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_ON",
    "RetryConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from repeated_assert.core.validation import (
    normalize_interval,
    validate_catch_params,
    validate_retry_on,
    validate_retry_params,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta


# Default maximum number of evaluations of the condition
# Total blocking time is at most (max_attempts - 1) * interval
DEFAULT_MAX_ATTEMPTS = 10

# Default delay in seconds between two attempts
DEFAULT_INTERVAL = 0.05

# Exceptions raised by a condition that count as a failed attempt
# AssertionError is an Exception, so assertion mismatches are included
DEFAULT_RETRY_ON: tuple[type[Exception], ...] = (Exception,)


@dataclass
class RetryConfig:
    """Configuration for a repeated assertion.

    The interval is normalized to seconds, so a ``datetime.timedelta``
    can be passed as well as a number.

    Args:
        max_attempts: Maximum number of evaluations of the condition. Must be >= 1.
        interval: Delay between two attempts in seconds. Must be >= 0.
        catch_after: Optional failing attempt index that triggers the recovery
            action. Must be in ``[1, max_attempts]``.
        recovery: Optional one-shot recovery action. Required with catch_after.
        retry_on: Exception types that count as a failed attempt. Other
            exceptions propagate immediately.

    Example:
        ```pycon
        >>> from repeated_assert import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_attempts
        10
        >>> config = RetryConfig(max_attempts=5, interval=0.1)
        >>> config.interval
        0.1
        >>> config.merge(max_attempts=3).max_attempts
        3
        >>> config.max_attempts
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    interval: float | timedelta = DEFAULT_INTERVAL
    catch_after: int | None = None
    recovery: Callable[[], Any] | None = None
    retry_on: tuple[type[Exception], ...] = DEFAULT_RETRY_ON

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
            TypeError: If recovery is not callable.
        """
        validate_retry_params(max_attempts=self.max_attempts, interval=self.interval)
        validate_catch_params(
            catch_after=self.catch_after,
            recovery=self.recovery,
            max_attempts=self.max_attempts,
        )
        validate_retry_on(self.retry_on)
        self.interval = normalize_interval(self.interval)

    @property
    def has_catch(self) -> bool:
        """Indicate whether a recovery action is configured."""
        return self.recovery is not None

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so the keyword
        arguments of the functional API can be forwarded as they are.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from repeated_assert import RetryConfig
            >>> config = RetryConfig(max_attempts=3)
            >>> config.merge(max_attempts=5, interval=None).max_attempts
            5

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
