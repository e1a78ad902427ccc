r"""Catch coordinator for the one-shot recovery action.

This module provides the CatchCoordinator class that observes the
attempt outcomes of a retry session and runs a caller-supplied recovery
action once, right after a configured number of failed attempts.
"""

from __future__ import annotations

__all__ = ["CatchCoordinator"]

import asyncio
import inspect
import logging
import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from repeated_assert.retry.outcome import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)


class CatchCoordinator:
    """Fires a recovery action exactly once per retry session.

    The coordinator never changes which attempts succeed or fail and
    never evaluates the condition itself. It only decides, from each
    outcome, whether the recovery action is due and remembers that it
    already ran. A coordinator without a recovery action is a no-op.

    Errors raised by the recovery action are not caught: they propagate
    and end the session.

    Attributes:
        catch_after: The failing attempt index that triggers recovery.
        recovery: The recovery action.
        recovered: Whether the recovery action already ran.

    Example:
        ```pycon
        >>> from repeated_assert import AttemptOutcome, CatchCoordinator
        >>> calls = []
        >>> coordinator = CatchCoordinator(catch_after=2, recovery=lambda: calls.append(1))
        >>> coordinator.should_recover(AttemptOutcome.failure(1, AssertionError()))
        False
        >>> coordinator.should_recover(AttemptOutcome.failure(2, AssertionError()))
        True
        >>> coordinator.recover()
        >>> calls
        [1]

        ```
    """

    def __init__(
        self,
        catch_after: int | None = None,
        recovery: Callable[[], Any] | None = None,
    ) -> None:
        self.catch_after = catch_after
        self.recovery = recovery
        self.recovered = False

    def should_recover(self, outcome: AttemptOutcome[Any]) -> bool:
        """Decide whether the recovery action is due after an outcome.

        Args:
            outcome: The outcome of the attempt that just completed.

        Returns:
            ``True`` if the attempt failed, its index is exactly
            ``catch_after`` and the recovery action has not run yet.
        """
        if self.recovery is None or self.recovered:
            return False
        return not outcome.succeeded and outcome.attempt == self.catch_after

    def recover(self) -> None:
        """Run the recovery action in the calling thread.

        Raises:
            TypeError: If the recovery action returned a coroutine. The
                coroutine is closed; use ``arecover`` to await it.
        """
        self.recovered = True
        logger.info(
            f"{threading.current_thread().name}: executing recovery action "
            f"after {self.catch_after} failed attempts"
        )
        result = self.recovery()
        if inspect.iscoroutine(result):
            result.close()
            msg = "recovery returned a coroutine, use the async driver to await it"
            raise TypeError(msg)

    async def arecover(self) -> None:
        """Run the recovery action, awaiting it if it is awaitable."""
        self.recovered = True
        task = asyncio.current_task()
        name = task.get_name() if task is not None else threading.current_thread().name
        logger.info(f"{name}: executing recovery action after {self.catch_after} failed attempts")
        result = self.recovery()
        if inspect.isawaitable(result):
            await result
