"""
Adaptive difficulty: streak detection, the inactivity watchdog and hint lookup.
"""

import logging
import threading
import time
from typing import Any, Callable, Iterable, Optional, Tuple

from .models import Adjustment, BoardSnapshot, DifficultyState, Position
from .pathfinder import PathFinder

logger = logging.getLogger(__name__)


# Streak length that triggers an adjustment
CONSECUTIVE_THRESHOLD = 3

# Seconds without a recorded outcome before a hint is offered
INACTIVITY_TIMEOUT = 30.0

Callback = Callable[[], None]
TimerFactory = Callable[[float, Callback], Any]


def _daemon_timer(interval: float, function: Callback) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class InactivityWatchdog:
    """
    Re-arming one-shot timer owned by a single session.

    Every `start()` replaces the pending timer. After firing, the watchdog
    calls `on_timeout` and arms itself again until `stop()` is called.
    A timer that fires after being stopped or replaced is ignored.

    Args:
        timeout: Seconds before `on_timeout` fires
        on_timeout: Callback run on the timer thread
        timer_factory: Builds an object with `start()` and `cancel()`;
            defaults to a daemon `threading.Timer`
    """

    def __init__(
        self,
        timeout: float = INACTIVITY_TIMEOUT,
        on_timeout: Optional[Callback] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        self.timeout = timeout
        self.on_timeout = on_timeout
        self._timer_factory = timer_factory or _daemon_timer
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        """Arm the watchdog, restarting the countdown if already armed."""
        with self._lock:
            self._arm()

    kick = start

    def stop(self) -> None:
        """Cancel any pending timer. Safe to call repeatedly."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _arm(self) -> None:
        self._generation += 1
        generation = self._generation
        if self._timer is not None:
            self._timer.cancel()
        self._timer = self._timer_factory(self.timeout, lambda: self._fire(generation))
        self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return

        try:
            if self.on_timeout is not None:
                self.on_timeout()
        finally:
            with self._lock:
                # The callback may have stopped or restarted us
                if generation == self._generation:
                    self._arm()


class DifficultyAdapter:
    """
    Watches the outcome stream for streaks and the clock for inactivity.

    Three correct outcomes in a row emit "increase", three wrong ones emit
    "decrease"; the triggering counter then starts over. The two counters
    are mutually exclusive.

    Args:
        on_increase: Called when a correct streak completes
        on_decrease: Called when a wrong streak completes
        on_inactivity_hint: Called by the watchdog after `inactivity_timeout`
        inactivity_timeout: Watchdog period in seconds
        timer_factory: Passed through to InactivityWatchdog
        clock: Wall-clock source for `last_action_timestamp`
    """

    def __init__(
        self,
        on_increase: Optional[Callback] = None,
        on_decrease: Optional[Callback] = None,
        on_inactivity_hint: Optional[Callback] = None,
        inactivity_timeout: float = INACTIVITY_TIMEOUT,
        timer_factory: Optional[TimerFactory] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.on_increase = on_increase
        self.on_decrease = on_decrease
        self.on_inactivity_hint = on_inactivity_hint
        self._clock = clock
        self._state = DifficultyState(last_action_timestamp=clock())
        self.watchdog = InactivityWatchdog(
            timeout=inactivity_timeout,
            on_timeout=self._handle_inactivity,
            timer_factory=timer_factory,
        )

    @property
    def consecutive_correct(self) -> int:
        return self._state.consecutive_correct

    @property
    def consecutive_wrong(self) -> int:
        return self._state.consecutive_wrong

    def set_callbacks(
        self,
        on_increase: Optional[Callback] = None,
        on_decrease: Optional[Callback] = None,
        on_inactivity_hint: Optional[Callback] = None,
    ) -> None:
        self.on_increase = on_increase
        self.on_decrease = on_decrease
        self.on_inactivity_hint = on_inactivity_hint

    def record_outcome(self, is_correct: bool) -> Adjustment:
        """
        Feed one match outcome into the state machine.

        Also restarts the inactivity countdown.

        Returns:
            "increase", "decrease" or "none"
        """
        self._state.last_action_timestamp = self._clock()
        self.watchdog.start()

        if is_correct:
            self._state.consecutive_correct += 1
            self._state.consecutive_wrong = 0
            if self._state.consecutive_correct >= CONSECUTIVE_THRESHOLD:
                self._state.consecutive_correct = 0
                logger.info("Correct streak reached, increasing difficulty")
                if self.on_increase:
                    self.on_increase()
                return "increase"
        else:
            self._state.consecutive_wrong += 1
            self._state.consecutive_correct = 0
            if self._state.consecutive_wrong >= CONSECUTIVE_THRESHOLD:
                self._state.consecutive_wrong = 0
                logger.info("Wrong streak reached, decreasing difficulty")
                if self.on_decrease:
                    self.on_decrease()
                return "decrease"

        return "none"

    def _handle_inactivity(self) -> None:
        logger.debug(f"No activity for {self.watchdog.timeout}s, emitting hint")
        if self.on_inactivity_hint:
            self.on_inactivity_hint()

    def start_inactivity_detection(self) -> None:
        self._state.last_action_timestamp = self._clock()
        self.watchdog.start()

    def stop_inactivity_detection(self) -> None:
        self.watchdog.stop()

    def reset(self) -> None:
        """Clear both streaks and stop the watchdog."""
        self._state = DifficultyState(last_action_timestamp=self._clock())
        self.watchdog.stop()

    def get_state(self) -> DifficultyState:
        return self._state.model_copy()

    def restore_from_state(self, state: DifficultyState) -> None:
        """Load saved counters. The watchdog is not touched."""
        self._state = state.model_copy()

    @staticmethod
    def should_increase(consecutive_correct: int) -> bool:
        return consecutive_correct >= CONSECUTIVE_THRESHOLD

    @staticmethod
    def should_decrease(consecutive_wrong: int) -> bool:
        return consecutive_wrong >= CONSECUTIVE_THRESHOLD

    @staticmethod
    def classify_sequence(outcomes: Iterable[bool]) -> Adjustment:
        """First adjustment a fresh adapter would emit for `outcomes`."""
        correct = wrong = 0
        for is_correct in outcomes:
            if is_correct:
                correct, wrong = correct + 1, 0
                if correct >= CONSECUTIVE_THRESHOLD:
                    return "increase"
            else:
                correct, wrong = 0, wrong + 1
                if wrong >= CONSECUTIVE_THRESHOLD:
                    return "decrease"
        return "none"


def find_hint_pair(
    board: BoardSnapshot,
    pathfinder: Optional[PathFinder] = None,
) -> Optional[Tuple[Position, Position]]:
    """
    First matching pair on the board that can currently be connected.

    Pairs are scanned in row-major order of their first tile.
    """
    pathfinder = pathfinder or PathFinder()
    tiles = board.occupied()

    for i, (pos_a, tile_a) in enumerate(tiles):
        for pos_b, tile_b in tiles[i + 1:]:
            if tile_a.pair_id != tile_b.pair_id or tile_a.kind == tile_b.kind:
                continue
            if pathfinder.find_path(pos_a, pos_b, board) is not None:
                return pos_a, pos_b

    return None
