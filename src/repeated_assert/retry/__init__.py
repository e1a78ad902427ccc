r"""Retry package implementing the repeated assertion drivers.

Public API:
    - AttemptOutcome: Outcome of one evaluation of a condition
    - RetrySession: Attempt state machine shared by both executors
    - SessionState: States of a retry session
    - CatchCoordinator: One-shot recovery action after N failures
    - RetryExecutor: Blocking retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "CatchCoordinator",
    "RetryExecutor",
    "RetrySession",
    "SessionState",
]

from repeated_assert.retry.executor import RetryExecutor
from repeated_assert.retry.executor_async import AsyncRetryExecutor
from repeated_assert.retry.manager import CatchCoordinator
from repeated_assert.retry.outcome import AttemptOutcome
from repeated_assert.retry.session import RetrySession, SessionState
