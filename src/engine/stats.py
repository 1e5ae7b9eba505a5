import time
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import GameResult, MatchRecord, Score


class SessionStats(BaseModel):
    """
    Score, match history and a pausable play clock for one session.

    The clock starts paused; time only accumulates between `start_timer()`
    and `pause_timer()`.

    Attributes:
        score: Running correct/wrong counters
        match_history: Every recorded match, oldest first
        clock: Monotonic time source in seconds
        wall_clock: Timestamp source for match records
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    score: Score = Field(default_factory=Score)
    match_history: List[MatchRecord] = Field(default_factory=list)
    clock: Callable[[], float] = Field(default=time.monotonic, exclude=True)
    wall_clock: Callable[[], float] = Field(default=time.time, exclude=True)
    _started_at: float = 0.0
    _elapsed: float = 0.0
    _paused: bool = True
    # Matches counted in a restored score whose records were not restored
    _restored_correct: int = 0
    _restored_wrong: int = 0

    @property
    def is_paused(self) -> bool:
        return self._paused

    def start_timer(self) -> None:
        if self._paused:
            self._started_at = self.clock() - self._elapsed
            self._paused = False

    def pause_timer(self) -> None:
        if not self._paused:
            self._elapsed = self.elapsed_seconds
            self._paused = True

    @property
    def elapsed_seconds(self) -> float:
        """Seconds of play so far; frozen while paused."""
        if self._paused:
            return self._elapsed
        return self.clock() - self._started_at

    def set_elapsed(self, seconds: float) -> None:
        """Overwrite the elapsed time (used when restoring a saved session)."""
        self._elapsed = seconds
        if not self._paused:
            self._started_at = self.clock() - seconds

    def reset(self) -> None:
        self.score = Score()
        self.match_history = []
        self._restored_correct = 0
        self._restored_wrong = 0
        self._started_at = 0.0
        self._elapsed = 0.0
        self._paused = True

    def record_match(self, word: str, meaning: str, is_correct: bool) -> MatchRecord:
        """Append a match to the history and bump the matching counter."""
        record = MatchRecord(
            word=word,
            meaning=meaning,
            is_correct=is_correct,
            timestamp=self.wall_clock(),
        )
        self.match_history.append(record)

        if is_correct:
            self.score.correct += 1
        else:
            self.score.wrong += 1

        return record

    def get_score(self) -> Score:
        return self.score.model_copy()

    def get_match_history(self) -> List[MatchRecord]:
        return list(self.match_history)

    def get_game_result(self) -> GameResult:
        return GameResult(
            correct=self.score.correct,
            wrong=self.score.wrong,
            duration_seconds=self.elapsed_seconds,
            match_history=list(self.match_history),
        )

    def restore_from_state(
        self,
        score: Score,
        elapsed_seconds: float,
        match_history: Optional[List[MatchRecord]] = None,
    ) -> None:
        """
        Load saved counters and clock; the timer is left paused.

        Saved sessions usually carry the score without its history. Matches
        the score counts but `match_history` lacks are remembered so that
        `validate_stats` keeps working on the restored session.
        """
        self.score = score.model_copy()
        self._elapsed = elapsed_seconds
        self.match_history = list(match_history or [])
        self._paused = True

        counts = self.counts_from_history(self.match_history)
        self._restored_correct = max(0, score.correct - counts["correct"])
        self._restored_wrong = max(0, score.wrong - counts["wrong"])

    @property
    def accuracy(self) -> float:
        """Share of correct matches, 0.0 when nothing was attempted."""
        total = self.score.correct + self.score.wrong
        return self.score.correct / total if total else 0.0

    @property
    def average_seconds_per_match(self) -> float:
        total = self.score.correct + self.score.wrong
        return self.elapsed_seconds / total if total else 0.0

    @staticmethod
    def counts_from_history(history: List[MatchRecord]) -> Dict[str, int]:
        """Recount correct/wrong from a match history."""
        correct = sum(1 for record in history if record.is_correct)
        return {"correct": correct, "wrong": len(history) - correct}

    def validate_stats(self) -> bool:
        """
        Check the running counters against a replay of the history.

        Matches restored without their records are added to the replay.
        A mismatch means a bug, not a reachable state.
        """
        counts = self.counts_from_history(self.match_history)
        correct = counts["correct"] + self._restored_correct
        wrong = counts["wrong"] + self._restored_wrong
        return correct == self.score.correct and wrong == self.score.wrong
