r"""Unit tests for the blocking functional API, including the scenarios
of the repeated assertion contract."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import Mock, call

import pytest

from repeated_assert import RetryConfig, all_of, check, check_eq, retry, retry_with_catch

###########################
#     Tests for retry     #
###########################


def test_retry_fails_fails_succeeds(mock_sleep: Mock, flaky_condition: type) -> None:
    """Test 3 evaluations and 2 sleeps of 10ms returning the 3rd value."""
    condition = flaky_condition(failures=2, value="third")
    assert retry(condition, max_attempts=3, interval=timedelta(milliseconds=10)) == "third"
    assert condition.calls == 3
    assert mock_sleep.call_args_list == [call(0.01), call(0.01)]


def test_retry_always_fails_with_message(mock_sleep: Mock) -> None:
    """Test the final error message is exactly the condition's own."""
    condition = Mock(side_effect=AssertionError("mismatch: expected 3 got 2"))
    with pytest.raises(AssertionError) as exc_info:
        retry(condition, max_attempts=2, interval=0.005)
    assert str(exc_info.value) == "mismatch: expected 3 got 2"
    assert condition.call_count == 2
    mock_sleep.assert_called_once_with(0.005)


def test_retry_failure_matches_standalone_evaluation(mock_sleep: Mock) -> None:
    """Test that the reported failure equals a standalone evaluation."""

    def make_condition() -> Mock:
        return Mock(side_effect=[TypeError("bad 1"), TypeError("bad 2"), TypeError("bad 3")])

    standalone = make_condition()
    for _ in range(2):
        with pytest.raises(TypeError):
            standalone()
    with pytest.raises(TypeError) as expected:
        standalone()

    with pytest.raises(TypeError) as actual:
        retry(make_condition(), max_attempts=3, interval=0.0)
    assert type(actual.value) is type(expected.value)
    assert actual.value.args == expected.value.args


def test_retry_success_on_first_attempt(mock_sleep: Mock) -> None:
    condition = Mock(return_value=1)
    assert retry(condition, max_attempts=10, interval=1.0) == 1
    condition.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_retry_uses_defaults(mock_sleep: Mock, flaky_condition: type) -> None:
    condition = flaky_condition(failures=20)
    with pytest.raises(AssertionError, match=r"attempt 10 failed"):
        retry(condition)
    assert condition.calls == 10
    assert mock_sleep.call_args_list == [call(0.05)] * 9


def test_retry_with_config(mock_sleep: Mock, flaky_condition: type) -> None:
    condition = flaky_condition(failures=5)
    with pytest.raises(AssertionError, match=r"attempt 4 failed"):
        retry(condition, config=RetryConfig(max_attempts=4, interval=0.2))
    assert mock_sleep.call_args_list == [call(0.2)] * 3


def test_retry_keyword_overrides_config(mock_sleep: Mock, flaky_condition: type) -> None:
    condition = flaky_condition(failures=5)
    with pytest.raises(AssertionError, match=r"attempt 2 failed"):
        retry(condition, max_attempts=2, config=RetryConfig(max_attempts=4, interval=0.2))
    mock_sleep.assert_called_once_with(0.2)


def test_retry_retry_on(mock_sleep: Mock) -> None:
    condition = Mock(side_effect=[AssertionError("no"), OSError("disk")])
    with pytest.raises(OSError, match=r"disk"):
        retry(condition, max_attempts=5, interval=0.0, retry_on=(AssertionError,))
    assert condition.call_count == 2


def test_retry_returned_false_is_success(mock_sleep: Mock) -> None:
    """Test that a returned False is a value, not a failure."""
    assert retry(Mock(return_value=False), max_attempts=3, interval=0.0) is False
    mock_sleep.assert_not_called()


def test_retry_with_check_helpers(mock_sleep: Mock) -> None:
    values = iter([0, 1, 3])
    assert retry(lambda: check_eq(next(values), 3), max_attempts=3, interval=0.0) == 3
    assert mock_sleep.call_count == 2


def test_retry_with_all_of(mock_sleep: Mock) -> None:
    ready = iter([False, True, True])
    condition = all_of(lambda: check(next(ready)), lambda: check_eq(11, 11))
    assert retry(condition, max_attempts=3, interval=0.0) == [True, 11]
    assert mock_sleep.call_count == 1


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_retry_rejects_invalid_max_attempts(max_attempts: int) -> None:
    condition = Mock()
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        retry(condition, max_attempts=max_attempts, interval=0.0)
    condition.assert_not_called()


def test_retry_rejects_negative_interval() -> None:
    with pytest.raises(ValueError, match=r"interval must be >= 0"):
        retry(Mock(), max_attempts=3, interval=-0.01)


######################################
#     Tests for retry_with_catch     #
######################################


def test_retry_with_catch_counter_equals_one(mock_sleep: Mock, flaky_condition: type) -> None:
    """Test the recovery counter is 1 (not 0, not 4) for catch_after=2."""
    counter = {"value": 0}

    def recovery() -> None:
        counter["value"] += 1

    with pytest.raises(AssertionError):
        retry_with_catch(
            flaky_condition(failures=5),
            max_attempts=5,
            interval=0.0,
            catch_after=2,
            recovery=recovery,
        )
    assert counter["value"] == 1


def test_retry_with_catch_recovery_makes_condition_pass(mock_sleep: Mock) -> None:
    service = {"up": False}
    evaluations = []

    def condition() -> str:
        evaluations.append(service["up"])
        assert service["up"], "service is down"
        return "up"

    result = retry_with_catch(
        condition,
        max_attempts=10,
        interval=0.05,
        catch_after=5,
        recovery=lambda: service.update(up=True),
    )
    assert result == "up"
    assert evaluations == [False] * 5 + [True]
    assert mock_sleep.call_count == 5


def test_retry_with_catch_not_fired_when_passing_on_catch_after(
    mock_sleep: Mock, mock_recovery: Mock, flaky_condition: type
) -> None:
    """Test recovery never fires when attempt catch_after passes."""
    condition = flaky_condition(failures=1)
    assert (
        retry_with_catch(
            condition, max_attempts=5, interval=0.0, catch_after=2, recovery=mock_recovery
        )
        == "ok"
    )
    mock_recovery.assert_not_called()


def test_retry_with_catch_does_not_change_terminal_failure(
    mock_sleep: Mock, mock_recovery: Mock, flaky_condition: type
) -> None:
    with pytest.raises(AssertionError, match=r"^attempt 3 failed$"):
        retry_with_catch(
            flaky_condition(failures=3),
            max_attempts=3,
            interval=0.0,
            catch_after=1,
            recovery=mock_recovery,
        )
    mock_recovery.assert_called_once_with()


def test_retry_with_catch_recovery_error_propagates(
    mock_sleep: Mock, flaky_condition: type
) -> None:
    condition = flaky_condition(failures=3)
    with pytest.raises(RuntimeError, match=r"recovery broke"):
        retry_with_catch(
            condition,
            max_attempts=3,
            interval=0.0,
            catch_after=1,
            recovery=Mock(side_effect=RuntimeError("recovery broke")),
        )
    assert condition.calls == 1


def test_retry_with_catch_rejects_catch_after_above_max_attempts(mock_recovery: Mock) -> None:
    with pytest.raises(ValueError, match=r"catch_after must be in \[1, 3\], got 4"):
        retry_with_catch(Mock(), max_attempts=3, catch_after=4, recovery=mock_recovery)


def test_retry_with_catch_rejects_zero_catch_after(mock_recovery: Mock) -> None:
    with pytest.raises(ValueError, match=r"catch_after must be in \[1, 3\], got 0"):
        retry_with_catch(Mock(), max_attempts=3, catch_after=0, recovery=mock_recovery)
