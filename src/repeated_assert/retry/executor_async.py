r"""Asynchronous retry executor for repeated assertions.

This module provides the AsyncRetryExecutor class, the cooperative
counterpart of RetryExecutor. It drives the same RetrySession and
CatchCoordinator, but awaits the condition, the recovery action and
the delay between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from repeated_assert.retry.manager import CatchCoordinator
from repeated_assert.retry.outcome import evaluate_async
from repeated_assert.retry.session import RetrySession, SessionState

if TYPE_CHECKING:
    from collections.abc import Callable

    from repeated_assert.core.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes a condition that may suspend, with a fixed delay between
    attempts.

    The delay uses ``asyncio.sleep``, so other tasks run while the
    executor waits. Attempts never overlap: each attempt completes before
    the next one starts. Cancelling the surrounding task cancels the
    session, since ``asyncio.CancelledError`` is never captured as a
    failed attempt.

    Attributes:
        config: Configuration with the attempt budget, the interval and
            the optional recovery action.

    Example:
        ```pycon
        >>> import asyncio
        >>> from repeated_assert import AsyncRetryExecutor, RetryConfig
        >>> async def condition():
        ...     await asyncio.sleep(0)
        ...     return "ready"
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(max_attempts=3, interval=0.0))
        >>> asyncio.run(executor.execute(condition))
        'ready'

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    async def execute(self, condition: Callable[[], Any]) -> Any:
        """Evaluate the condition until it passes.

        Args:
            condition: Zero-argument coroutine function or plain callable.
                It passes when it returns (after awaiting the returned
                awaitable, if any) and fails when it raises one of
                ``config.retry_on``.

        Returns:
            The value produced by the first passing attempt.

        Raises:
            Exception: The exception raised by the last attempt if every
                attempt failed, any exception outside ``config.retry_on``
                as soon as it is raised, or the exception raised by the
                recovery action.
        """
        session = RetrySession(self.config.max_attempts)
        catcher = CatchCoordinator(self.config.catch_after, self.config.recovery)
        while True:
            outcome = await evaluate_async(condition, session.attempt, self.config.retry_on)
            state = session.record(outcome)
            if catcher.should_recover(outcome):
                await catcher.arecover()
            if state is not SessionState.SLEEPING:
                break
            logger.debug(
                f"Waiting {self.config.interval:.2f}s before attempt "
                f"{session.attempt + 1}/{session.max_attempts}"
            )
            await asyncio.sleep(self.config.interval)
            session.advance()

        if state is SessionState.SUCCEEDED:
            logger.debug(f"Condition passed on attempt {session.attempt}/{session.max_attempts}")
        else:
            logger.debug(f"Condition did not pass after {session.attempt} attempts")
        return session.result()
