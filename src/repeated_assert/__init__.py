r"""repeated_assert - Assertions that are re-tried until they pass.

This package repeatedly evaluates a caller-supplied condition until it
passes or a maximum number of attempts is exhausted, sleeping a fixed
interval between attempts. It stabilizes tests that depend on
asynchronous or cross-process state (files appearing, background
threads finishing, remote services updating) without resorting to a
single long sleep.

Key Features:
    - Fixed number of attempts with a fixed interval between them
    - Intermediate failures are suppressed, the last one is re-raised unchanged
    - One-shot recovery action after a configured number of failed attempts
    - Blocking drivers (``time.sleep``) and asyncio drivers (``asyncio.sleep``)
    - Decorator form and small assertion helpers for writing conditions

Example:
    ```pycon
    >>> from pathlib import Path
    >>> from repeated_assert import check, retry
    >>> # Wait for a file to appear: up to 10 attempts, 50 ms apart
    >>> retry(
    ...     lambda: check(Path("should_appear_soon.txt").exists()),
    ...     max_attempts=10,
    ...     interval=0.05,
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "CatchCoordinator",
    "RetryConfig",
    "RetryExecutor",
    "RetrySession",
    "SessionState",
    "__version__",
    "all_of",
    "check",
    "check_eq",
    "repeated",
    "retry",
    "retry_async",
    "retry_with_catch",
    "retry_with_catch_async",
]

from importlib.metadata import PackageNotFoundError, version

from repeated_assert.checks import all_of, check, check_eq
from repeated_assert.core.config import DEFAULT_INTERVAL, DEFAULT_MAX_ATTEMPTS, RetryConfig
from repeated_assert.decorators import repeated
from repeated_assert.repeat import retry, retry_with_catch
from repeated_assert.repeat_async import retry_async, retry_with_catch_async
from repeated_assert.retry import (
    AsyncRetryExecutor,
    AttemptOutcome,
    CatchCoordinator,
    RetryExecutor,
    RetrySession,
    SessionState,
)

try:
    __version__ = version("repeated-assert")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
