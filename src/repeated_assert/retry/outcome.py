r"""Attempt outcomes and condition evaluation.

This module provides the AttemptOutcome class that captures the result
of one evaluation of a condition, together with helpers that evaluate a
blocking or an awaitable condition and capture its failure.
"""

from __future__ import annotations

__all__ = ["AttemptOutcome", "evaluate", "evaluate_async"]

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


@dataclass(frozen=True)
class AttemptOutcome(Generic[T]):
    """The outcome of one evaluation of a condition.

    Exactly one of ``value`` and ``error`` is meaningful: an outcome with
    ``error`` set is a failure, otherwise it is a success carrying
    ``value`` (which may legitimately be ``None``).

    Attributes:
        attempt: The attempt index (1-indexed) that produced this outcome.
        value: The value returned by the condition on success.
        error: The exception raised by the condition on failure.

    Example:
        ```pycon
        >>> from repeated_assert import AttemptOutcome
        >>> AttemptOutcome.success(1, 42).succeeded
        True
        >>> AttemptOutcome.failure(1, AssertionError("boom")).succeeded
        False

        ```
    """

    attempt: int
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, attempt: int, value: T) -> AttemptOutcome[T]:
        return cls(attempt=attempt, value=value)

    @classmethod
    def failure(cls, attempt: int, error: Exception) -> AttemptOutcome[T]:
        return cls(attempt=attempt, error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the success value or re-raise the captured failure.

        The captured exception is raised as the very same object, so its
        type, message and original traceback are preserved.

        Returns:
            The value produced by the condition.

        Raises:
            Exception: The exception captured from the condition.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def evaluate(
    condition: Callable[[], T],
    attempt: int,
    retry_on: tuple[type[Exception], ...] = (Exception,),
) -> AttemptOutcome[T]:
    """Evaluate a blocking condition once and capture its outcome.

    Args:
        condition: Zero-argument callable to evaluate.
        attempt: The current attempt index (1-indexed).
        retry_on: Exception types captured as a failure. Any other
            exception propagates to the caller unchanged.

    Returns:
        The outcome of the evaluation.

    Raises:
        TypeError: If the condition returned a coroutine. The coroutine
            is closed without running; use ``evaluate_async`` for it.

    Example:
        ```pycon
        >>> from repeated_assert.retry.outcome import evaluate
        >>> evaluate(lambda: 3, attempt=1).value
        3
        >>> evaluate(lambda: 1 / 0, attempt=2).error
        ZeroDivisionError('division by zero')

        ```
    """
    try:
        value = condition()
    except retry_on as exc:
        return AttemptOutcome.failure(attempt, exc)
    if inspect.iscoroutine(value):
        value.close()
        msg = "condition returned a coroutine, use retry_async to await it"
        raise TypeError(msg)
    return AttemptOutcome.success(attempt, value)


async def evaluate_async(
    condition: Callable[[], Any],
    attempt: int,
    retry_on: tuple[type[Exception], ...] = (Exception,),
) -> AttemptOutcome[Any]:
    """Evaluate a condition that may suspend and capture its outcome.

    The condition can be a coroutine function or a plain callable. When
    it returns an awaitable, the awaitable is awaited as part of the
    same attempt.

    Args:
        condition: Zero-argument callable to evaluate.
        attempt: The current attempt index (1-indexed).
        retry_on: Exception types captured as a failure. Any other
            exception, including ``asyncio.CancelledError``, propagates
            to the caller unchanged.

    Returns:
        The outcome of the evaluation.
    """
    try:
        value = condition()
        if inspect.isawaitable(value):
            value = await value
    except retry_on as exc:
        return AttemptOutcome.failure(attempt, exc)
    return AttemptOutcome.success(attempt, value)
