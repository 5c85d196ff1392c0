"""Stopwatch state machine driven by the game client."""

from __future__ import annotations

import enum
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..core.config import TICK_SECONDS


class TimerStateError(RuntimeError):
    pass


class TimerState(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class AttemptSubmission:
    """Payload for ``POST /api/attempt``."""

    player_name: str
    time: float
    attempts: int
    message: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "playerName": self.player_name,
            "time": self.time,
            "attempts": self.attempts,
        }
        if self.message is not None:
            payload["message"] = self.message
        return payload


class TimerGame:
    """Count-up clock with attempt bookkeeping.

    Elapsed time is kept as a whole number of ticks so that a stop after
    1000 ticks reads exactly 10.00 rather than an accumulated float.
    """

    def __init__(self, player_name: str, tick_seconds: float = TICK_SECONDS):
        self.player_name = player_name
        self.tick_seconds = tick_seconds
        self.state = TimerState.IDLE
        self.ticks = 0
        self.attempts = 0
        self.rank: Optional[int] = None
        self.is_perfect = False
        self.is_new_record = False
        self.submit_failed = False

    @property
    def elapsed(self) -> float:
        return round(self.ticks * self.tick_seconds, 2)

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    def start(self) -> None:
        if self.is_running:
            raise TimerStateError("Timer is already running")
        self.state = TimerState.RUNNING
        self.ticks = 0
        self.rank = None
        self.is_perfect = False
        self.is_new_record = False
        self.submit_failed = False

    def tick(self) -> None:
        if self.is_running:
            self.ticks += 1

    def advance(self, seconds: float) -> None:
        """Apply the ticks a real interval timer would have fired."""

        if not self.is_running or seconds <= 0:
            return
        # nudge so 10.0 / 0.01 does not floor to 999
        self.ticks += int(math.floor(seconds / self.tick_seconds + 1e-9))

    def stop(self) -> AttemptSubmission:
        if not self.is_running:
            raise TimerStateError("Timer is not running")
        self.state = TimerState.STOPPED
        self.attempts += 1
        return AttemptSubmission(
            player_name=self.player_name,
            time=self.elapsed,
            attempts=self.attempts,
        )

    def record_result(self, result: Dict[str, Any]) -> None:
        self.is_perfect = bool(result.get("isPerfect"))
        self.rank = result.get("rank")
        self.is_new_record = bool(result.get("isNewRecord"))
        self.submit_failed = False

    def record_failure(self) -> None:
        """Stopped, but no rank."""

        self.rank = None
        self.is_perfect = False
        self.is_new_record = False
        self.submit_failed = True

    def display_time(self, slow_mode: bool = False) -> str:
        value = self.elapsed
        if slow_mode:
            value = math.floor(value * 5 + 1e-9) / 5
        return f"{value:.2f}"


def run_until_stopped(
    game: TimerGame,
    wait_for_stop: Callable[[], Any],
    clock: Callable[[], float] = time.monotonic,
) -> AttemptSubmission:
    """Start the game, block in ``wait_for_stop``, then stop on return."""

    game.start()
    started = clock()
    wait_for_stop()
    game.advance(clock() - started)
    return game.stop()


__all__ = [
    "AttemptSubmission",
    "TimerGame",
    "TimerState",
    "TimerStateError",
    "run_until_stopped",
]
