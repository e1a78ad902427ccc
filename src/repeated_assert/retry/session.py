r"""State machine of one retry session.

This module provides the RetrySession class that owns the attempt
counter and the most recent attempt outcome of a single call to a retry
driver. The blocking and the async executors both drive the same
session, so the decision of when to sleep, succeed or give up lives in
one place.
"""

from __future__ import annotations

__all__ = ["RetrySession", "SessionState"]

from enum import Enum
from typing import TYPE_CHECKING, Any

from repeated_assert.core.validation import validate_retry_params

if TYPE_CHECKING:
    from repeated_assert.retry.outcome import AttemptOutcome


class SessionState(Enum):
    """States of a retry session.

    ``SUCCEEDED`` and ``FAILED`` are terminal.
    """

    EVALUATING = "evaluating"
    SLEEPING = "sleeping"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RetrySession:
    """Tracks the attempts of a single retry session.

    The session starts in ``EVALUATING`` for attempt 1. Each recorded
    outcome moves it to ``SUCCEEDED`` on success, to ``FAILED`` when the
    last permitted attempt failed, or to ``SLEEPING`` otherwise.
    ``advance`` then moves from ``SLEEPING`` to ``EVALUATING`` of the
    next attempt. Only the most recent outcome is retained.

    Args:
        max_attempts: Maximum number of evaluations of the condition.

    Example:
        ```pycon
        >>> from repeated_assert import AttemptOutcome, RetrySession
        >>> session = RetrySession(max_attempts=2)
        >>> session.record(AttemptOutcome.failure(1, AssertionError("no")))
        <SessionState.SLEEPING: 'sleeping'>
        >>> session.advance()
        >>> session.attempt
        2
        >>> session.record(AttemptOutcome.success(2, "ok"))
        <SessionState.SUCCEEDED: 'succeeded'>
        >>> session.result()
        'ok'

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        validate_retry_params(max_attempts=max_attempts, interval=0.0)
        self.max_attempts = max_attempts
        self.attempt = 1
        self.state = SessionState.EVALUATING
        self.last_outcome: AttemptOutcome[Any] | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(attempt={self.attempt}, "
            f"max_attempts={self.max_attempts}, state={self.state.name})"
        )

    @property
    def done(self) -> bool:
        return self.state in (SessionState.SUCCEEDED, SessionState.FAILED)

    @property
    def is_last_attempt(self) -> bool:
        return self.attempt >= self.max_attempts

    def record(self, outcome: AttemptOutcome[Any]) -> SessionState:
        """Record the outcome of the current attempt.

        Args:
            outcome: The outcome produced by evaluating the condition.

        Returns:
            The new state of the session.

        Raises:
            RuntimeError: If the session is not evaluating an attempt.
        """
        self._ensure_state(SessionState.EVALUATING, "record an outcome")
        self.last_outcome = outcome
        if outcome.succeeded:
            self.state = SessionState.SUCCEEDED
        elif self.is_last_attempt:
            self.state = SessionState.FAILED
        else:
            self.state = SessionState.SLEEPING
        return self.state

    def advance(self) -> None:
        """Move to the next attempt once the interval elapsed.

        Raises:
            RuntimeError: If the session is not sleeping.
        """
        self._ensure_state(SessionState.SLEEPING, "advance")
        self.attempt += 1
        self.state = SessionState.EVALUATING

    def result(self) -> Any:
        """Return the success value or raise the terminal failure.

        Returns:
            The value produced by the successful attempt.

        Raises:
            Exception: The exception captured from the last attempt, raised
                unchanged, if the session failed.
            RuntimeError: If the session is not finished.
        """
        if not self.done or self.last_outcome is None:
            msg = f"cannot get the result while {self.state.value}"
            raise RuntimeError(msg)
        return self.last_outcome.unwrap()

    def _ensure_state(self, expected: SessionState, action: str) -> None:
        if self.state is not expected:
            msg = f"cannot {action} while {self.state.value}"
            raise RuntimeError(msg)
