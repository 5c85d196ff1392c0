"""Game client: timer state machine and API access."""

from .api import ApiError, DarkTimerClient
from .timer import (
    AttemptSubmission,
    TimerGame,
    TimerState,
    TimerStateError,
    run_until_stopped,
)

__all__ = [
    "ApiError",
    "AttemptSubmission",
    "DarkTimerClient",
    "TimerGame",
    "TimerState",
    "TimerStateError",
    "run_until_stopped",
]
