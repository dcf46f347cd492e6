"""
Retrying solution fetcher
Tries a random selection of identities against the upstream API, one at a
time, and returns the first usable solution
"""
import random
import logging
import time
from typing import List, Optional, Sequence

import httpx

from errors import AllAttemptsExhausted, EmptyPool, MissingParameter
from models import (
    AttemptState,
    LogicalFailure,
    Outcome,
    RetryState,
    Success,
    TransportFailure,
    step,
)

logger = logging.getLogger(__name__)

MAX_RETRIES = 3

_system_random = random.SystemRandom()


def select_attempt_order(pool: Sequence[str], max_attempts: int = MAX_RETRIES, rng: Optional[random.Random] = None) -> List[str]:
    """
    Shuffle a copy of the pool and keep the first min(max_attempts, len(pool)).

    Args:
        pool: Identities to choose from (left untouched)
        max_attempts: Upper bound on attempts
        rng: Random source, pass a seeded random.Random for repeatable order

    Returns:
        Identities to try, in order
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    order = list(pool)
    (rng or _system_random).shuffle(order)
    return order[:min(max_attempts, len(order))]


def classify_response(response: httpx.Response, identity: str) -> Outcome:
    """Turn a completed upstream response into an attempt outcome"""
    if not response.is_success:
        return TransportFailure(f"API request failed (User: {identity}, Status: {response.status_code})")

    try:
        body = response.json()
    except ValueError:
        return LogicalFailure("API returned an invalid response.")
    if not isinstance(body, dict):
        return LogicalFailure("API returned an invalid response.")

    message = body.get("message")
    data = body.get("data")
    solution = data.get("solution") if isinstance(data, dict) else None

    if body.get("status") == "success" and isinstance(solution, str) and solution:
        return Success(solution)
    return LogicalFailure(str(message) if message else "API returned non-success.")


async def lookup_once(client: httpx.AsyncClient, base_url: str, identity: str, question_id: str) -> Outcome:
    """Issue a single upstream lookup; never raises for transport problems"""
    params = {
        "action": "get_solution",
        "user_id": identity,
        "question_id": question_id,
    }
    try:
        response = await client.get(base_url, params=params)
    except httpx.HTTPError as e:
        logger.error(f"[LOOKUP_ERROR] Fetch error for user {identity}: {e!r}")
        return TransportFailure(str(e) or type(e).__name__)
    return classify_response(response, identity)


async def fetch_solution(
    question_id: str,
    pool: Sequence[str],
    client: httpx.AsyncClient,
    base_url: str,
    max_attempts: int = MAX_RETRIES,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Fetch one solution, rotating through identities until one works.

    Args:
        question_id: Upstream question identifier
        pool: Non-empty identity pool
        client: HTTP client used for every attempt
        base_url: Upstream endpoint
        max_attempts: Attempt budget
        rng: Random source for the identity order

    Returns:
        Raw solution text

    Raises:
        MissingParameter: blank question_id (no upstream call made)
        EmptyPool: no identities to try
        AllAttemptsExhausted: every attempt failed, carries the last reason
    """
    if question_id is None or not str(question_id).strip():
        raise MissingParameter()
    question_id = str(question_id).strip()
    if not pool:
        raise EmptyPool()

    state = RetryState.start(select_attempt_order(pool, max_attempts, rng))
    logger.info(f"[LOOKUP_START] Question {question_id}: {len(state.attempts)} attempt(s) planned from pool of {len(pool)}")

    while not state.is_terminal:
        identity = state.next_identity
        attempt_number = state.index + 1
        logger.info(f"[LOOKUP_ATTEMPT] Attempt {attempt_number}/{len(state.attempts)} with user {identity}")
        started = time.time()
        outcome = await lookup_once(client, base_url, identity, question_id)
        duration = time.time() - started
        state = step(state, outcome)

        if state.state == AttemptState.SUCCESS:
            logger.info(f"[LOOKUP_SUCCESS] Solution found for question {question_id} on attempt {attempt_number} ({duration:.2f}s)")
        else:
            logger.warning(f"[LOOKUP_FAILED] Attempt {attempt_number} ({type(outcome).__name__}, {duration:.2f}s): {outcome.message}")

    if state.state == AttemptState.SUCCESS:
        return state.solution

    logger.error(f"[LOOKUP_EXHAUSTED] Question {question_id}: {_summary(state)}")
    raise AllAttemptsExhausted(state.last_reason)


def _summary(state: RetryState) -> str:
    info = state.to_dict()
    return f"{info['attempts_made']}/{info['attempts_planned']} attempts failed, last reason: {info['last_reason']}"
