"""
Tests for the retry state machine
"""
import pytest

from models import (
    AttemptState,
    LogicalFailure,
    RetryState,
    Success,
    TransportFailure,
    default_failure_reason,
    step,
)


def test_start_is_pending_with_default_reason():
    state = RetryState.start(["u1", "u2"])
    assert state.state == AttemptState.PENDING
    assert state.next_identity == "u1"
    assert state.last_reason == default_failure_reason(2)
    assert not state.is_terminal


def test_start_with_no_attempts_is_exhausted():
    state = RetryState.start([])
    assert state.state == AttemptState.EXHAUSTED
    assert state.next_identity is None


def test_success_is_terminal():
    state = step(RetryState.start(["u1", "u2", "u3"]), Success("int main(){}"))
    assert state.state == AttemptState.SUCCESS
    assert state.is_terminal
    assert state.solution == "int main(){}"
    assert len(state.history) == 1


def test_failures_advance_then_exhaust():
    state = RetryState.start(["u1", "u2"])

    state = step(state, TransportFailure("connection refused"))
    assert state.state == AttemptState.TRANSPORT_FAILURE
    assert state.next_identity == "u2"

    state = step(state, LogicalFailure("not found"))
    assert state.state == AttemptState.EXHAUSTED
    assert state.next_identity is None


def test_last_reason_wins():
    state = RetryState.start(["u1", "u2", "u3"])
    state = step(state, LogicalFailure("first"))
    state = step(state, TransportFailure("second"))
    state = step(state, LogicalFailure("third"))
    assert state.state == AttemptState.EXHAUSTED
    assert state.last_reason == "third"
    assert [r.message for r in state.history] == ["first", "second", "third"]


def test_single_identity_failure_exhausts_after_one_attempt():
    state = step(RetryState.start(["u1"]), TransportFailure("boom"))
    assert state.state == AttemptState.EXHAUSTED
    assert len(state.history) == 1
    assert state.last_reason == "boom"


def test_step_on_terminal_state_raises():
    state = step(RetryState.start(["u1"]), Success("x"))
    with pytest.raises(ValueError):
        step(state, Success("y"))


def test_step_does_not_mutate_previous_state():
    start = RetryState.start(["u1", "u2"])
    step(start, LogicalFailure("nope"))
    assert start.index == 0
    assert start.history == ()


def test_to_dict_summarises_history():
    state = step(RetryState.start(["u1", "u2"]), LogicalFailure("not found"))
    info = state.to_dict()
    assert info["state"] == "logical_failure"
    assert info["attempts_made"] == 1
    assert info["attempts_planned"] == 2
    assert info["history"][0] == {"identity": "u1", "state": "logical_failure", "message": "not found"}
