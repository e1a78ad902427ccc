r"""Core configuration and validation shared by the blocking and async
retry drivers."""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_ON",
    "RetryConfig",
    "normalize_interval",
    "validate_catch_params",
    "validate_retry_on",
    "validate_retry_params",
]

from repeated_assert.core.config import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_ON,
    RetryConfig,
)
from repeated_assert.core.validation import (
    normalize_interval,
    validate_catch_params,
    validate_retry_on,
    validate_retry_params,
)
