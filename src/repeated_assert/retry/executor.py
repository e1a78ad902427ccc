r"""Blocking retry executor for repeated assertions.

This module provides the RetryExecutor class that evaluates a condition
until it passes or the attempt budget is exhausted, blocking the calling
thread between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from repeated_assert.retry.manager import CatchCoordinator
from repeated_assert.retry.outcome import evaluate
from repeated_assert.retry.session import RetrySession, SessionState

if TYPE_CHECKING:
    from collections.abc import Callable

    from repeated_assert.core.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a condition with a fixed delay between attempts.

    Everything runs on the calling thread: the condition, the optional
    recovery action and the ``time.sleep`` between attempts. No thread
    is spawned.

    Attributes:
        config: Configuration with the attempt budget, the interval and
            the optional recovery action.

    Example:
        ```pycon
        >>> from repeated_assert import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(max_attempts=3, interval=0.0))
        >>> values = iter([0, 1, 2])
        >>> def condition():
        ...     value = next(values)
        ...     assert value == 2, f"expected 2 got {value}"
        ...     return value
        ...
        >>> executor.execute(condition)
        2

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def execute(self, condition: Callable[[], T]) -> T:
        """Evaluate the condition until it passes.

        Intermediate failures are suppressed. Only the failure of the
        last permitted attempt reaches the caller, and it is the exact
        exception raised by the condition.

        Args:
            condition: Zero-argument callable. It passes when it returns
                and fails when it raises one of ``config.retry_on``.

        Returns:
            The value returned by the first passing attempt.

        Raises:
            Exception: The exception raised by the last attempt if every
                attempt failed, any exception outside ``config.retry_on``
                as soon as it is raised, or the exception raised by the
                recovery action.
        """
        session = RetrySession(self.config.max_attempts)
        catcher = CatchCoordinator(self.config.catch_after, self.config.recovery)
        while True:
            outcome = evaluate(condition, session.attempt, self.config.retry_on)
            state = session.record(outcome)
            if catcher.should_recover(outcome):
                catcher.recover()
            if state is not SessionState.SLEEPING:
                break
            logger.debug(
                f"Waiting {self.config.interval:.2f}s before attempt "
                f"{session.attempt + 1}/{session.max_attempts}"
            )
            time.sleep(self.config.interval)
            session.advance()

        if state is SessionState.SUCCEEDED:
            logger.debug(f"Condition passed on attempt {session.attempt}/{session.max_attempts}")
        else:
            logger.debug(f"Condition did not pass after {session.attempt} attempts")
        return session.result()
