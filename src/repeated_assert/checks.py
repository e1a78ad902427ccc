r"""Assertion helpers for writing conditions.

A condition passes when it returns and fails when it raises, so a bare
boolean has to be turned into an ``AssertionError``. These helpers do
that with a readable message, and ``all_of`` chains several checks into
one condition.
"""

from __future__ import annotations

__all__ = ["all_of", "check", "check_eq"]

import inspect
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def check(value: T, message: str | None = None) -> T:
    """Fail unless ``value`` is truthy.

    Args:
        value: The value to check.
        message: Optional message of the ``AssertionError``.

    Returns:
        The value, unchanged.

    Raises:
        AssertionError: If the value is falsy.

    Example:
        ```pycon
        >>> from repeated_assert import check
        >>> check([1])
        [1]
        >>> check(0)
        Traceback (most recent call last):
        ...
        AssertionError: assertion failed: 0

        ```
    """
    if not value:
        raise AssertionError(message if message is not None else f"assertion failed: {value!r}")
    return value


def check_eq(left: T, right: Any, message: str | None = None) -> T:
    """Fail unless ``left == right``.

    Args:
        left: The actual value.
        right: The expected value.
        message: Optional message of the ``AssertionError``.

    Returns:
        The left value.

    Raises:
        AssertionError: If the values differ.

    Example:
        ```pycon
        >>> from repeated_assert import check_eq
        >>> check_eq(3, 3)
        3
        >>> check_eq(2, 3)
        Traceback (most recent call last):
        ...
        AssertionError: 2 != 3

        ```
    """
    if left != right:
        raise AssertionError(message if message is not None else f"{left!r} != {right!r}")
    return left


def all_of(*conditions: Callable[[], Any]) -> Callable[[], Any]:
    """Combine conditions into one that passes when all of them pass.

    The conditions are evaluated in order and the evaluation stops at the
    first failure, whose exception is the failure of the combined
    condition. If any condition is a coroutine function, the combined
    condition is a coroutine function too: it awaits each part in order
    and must be driven by ``retry_async``.

    Args:
        *conditions: Zero-argument callables or coroutine functions.

    Returns:
        A zero-argument callable returning the list of values.

    Raises:
        ValueError: If no condition is given.
        TypeError: When the combined condition is called, if a plain
            callable part returned a coroutine. The coroutine is closed.

    Example:
        ```pycon
        >>> from repeated_assert import all_of, check, check_eq
        >>> condition = all_of(lambda: check(True), lambda: check_eq(1 + 1, 2))
        >>> condition()
        [True, 2]

        ```
    """
    if not conditions:
        msg = "all_of requires at least one condition"
        raise ValueError(msg)

    if any(inspect.iscoroutinefunction(condition) for condition in conditions):

        async def async_combined() -> list[Any]:
            values = []
            for condition in conditions:
                value = condition()
                if inspect.isawaitable(value):
                    value = await value
                values.append(value)
            return values

        return async_combined

    def combined() -> list[Any]:
        values = []
        for condition in conditions:
            value = condition()
            if inspect.iscoroutine(value):
                value.close()
                msg = "all_of part returned a coroutine, declare it with async def"
                raise TypeError(msg)
            values.append(value)
        return values

    return combined
