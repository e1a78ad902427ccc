from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_recovery() -> Mock:
    """Create a mock recovery action for testing the catch coordinator.

    Returns:
        A Mock object that can be used as a recovery action.
    """
    return Mock(return_value=None)


class FlakyCondition:
    """Condition failing a fixed number of times before passing.

    Args:
        failures: Number of failing evaluations before the first pass.
        value: Value returned once the condition passes.
        message_format: Format of the assertion message, filled with the
            1-indexed call number.
    """

    def __init__(
        self,
        failures: int,
        value: object = "ok",
        message_format: str = "attempt {} failed",
    ) -> None:
        self.failures = failures
        self.value = value
        self.message_format = message_format
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            raise AssertionError(self.message_format.format(self.calls))
        return self.value


class AsyncFlakyCondition(FlakyCondition):
    """Coroutine counterpart of ``FlakyCondition``."""

    async def __call__(self) -> object:  # type: ignore[override]
        return super().__call__()


@pytest.fixture
def flaky_condition() -> type[FlakyCondition]:
    return FlakyCondition


@pytest.fixture
def async_flaky_condition() -> type[AsyncFlakyCondition]:
    return AsyncFlakyCondition
