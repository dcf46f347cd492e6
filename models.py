"""
Data models for solution lookups
Attempt outcomes and the retry state machine stepped by the fetcher
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Success:
    """Upstream returned a usable solution"""
    solution: str


@dataclass(frozen=True)
class LogicalFailure:
    """Call completed but the upstream reported non-success"""
    message: str


@dataclass(frozen=True)
class TransportFailure:
    """Call could not complete (connection error or non-2xx status)"""
    message: str


Outcome = Union[Success, LogicalFailure, TransportFailure]


class AttemptState(str, Enum):
    PENDING = "pending"
    TRANSPORT_FAILURE = "transport_failure"
    LOGICAL_FAILURE = "logical_failure"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"


TERMINAL_STATES = {AttemptState.SUCCESS, AttemptState.EXHAUSTED}


@dataclass(frozen=True)
class AttemptRecord:
    """Result of one upstream call"""
    identity: str
    state: AttemptState
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "state": self.state.value,
            "message": self.message,
        }


def default_failure_reason(attempt_count: int) -> str:
    return f"Failed to retrieve solution after {attempt_count} attempts."


@dataclass(frozen=True)
class RetryState:
    """Request-scoped progress through the attempt sequence"""
    attempts: Tuple[str, ...]
    index: int = 0
    state: AttemptState = AttemptState.PENDING
    last_reason: Optional[str] = None
    solution: Optional[str] = None
    history: Tuple[AttemptRecord, ...] = field(default_factory=tuple)

    @classmethod
    def start(cls, attempts) -> "RetryState":
        attempts = tuple(attempts)
        if not attempts:
            return cls(
                attempts=attempts,
                state=AttemptState.EXHAUSTED,
                last_reason=default_failure_reason(0),
            )
        return cls(attempts=attempts, last_reason=default_failure_reason(len(attempts)))

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def next_identity(self) -> Optional[str]:
        if self.is_terminal:
            return None
        return self.attempts[self.index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "attempts_made": len(self.history),
            "attempts_planned": len(self.attempts),
            "last_reason": self.last_reason,
            "history": [record.to_dict() for record in self.history],
        }


def step(state: RetryState, outcome: Outcome) -> RetryState:
    """
    Advance the retry state by the outcome of the attempt at `state.index`.

    Success is terminal. A failure replaces `last_reason`, then moves on to
    the next identity or to EXHAUSTED when none remain.
    """
    if state.is_terminal:
        raise ValueError(f"Cannot step a terminal retry state ({state.state.value})")

    identity = state.attempts[state.index]

    if isinstance(outcome, Success):
        record = AttemptRecord(identity, AttemptState.SUCCESS)
        return replace(
            state,
            index=state.index + 1,
            state=AttemptState.SUCCESS,
            solution=outcome.solution,
            history=state.history + (record,),
        )

    if isinstance(outcome, TransportFailure):
        failed_state = AttemptState.TRANSPORT_FAILURE
    elif isinstance(outcome, LogicalFailure):
        failed_state = AttemptState.LOGICAL_FAILURE
    else:
        raise TypeError(f"Unknown attempt outcome: {outcome!r}")

    record = AttemptRecord(identity, failed_state, outcome.message)
    next_index = state.index + 1
    if next_index >= len(state.attempts):
        failed_state = AttemptState.EXHAUSTED

    return replace(
        state,
        index=next_index,
        state=failed_state,
        last_reason=outcome.message,
        history=state.history + (record,),
    )
