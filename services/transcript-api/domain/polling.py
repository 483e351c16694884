"""State machine for transcript job polling."""

from enum import Enum


class PollState(str, Enum):
    """Lifecycle of a transcript job as seen by the poller."""

    CREATED = "created"
    POLLING = "polling"
    COMPLETED = "completed"
    ERROR = "error"
    TIMED_OUT = "timed_out"


TERMINAL_STATES = frozenset({PollState.COMPLETED, PollState.ERROR, PollState.TIMED_OUT})

COMPLETED_STATUS = "completed"
ERROR_STATUS = "error"


def next_state(status: str | None, attempt: int, max_attempts: int) -> PollState:
    """
    Computes the poller state after a status check.

    Args:
        status: Job status reported by the service on this check.
        attempt: Number of status checks made so far, including this one.
        max_attempts: Maximum number of status checks allowed.

    Returns:
        COMPLETED or ERROR for terminal service statuses, TIMED_OUT once the
        attempt budget is spent, POLLING otherwise.
    """
    if status == COMPLETED_STATUS:
        return PollState.COMPLETED
    if status == ERROR_STATUS:
        return PollState.ERROR
    if attempt >= max_attempts:
        return PollState.TIMED_OUT
    return PollState.POLLING
