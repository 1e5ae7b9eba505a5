import logging
from pathlib import Path as FilePath
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .board import Board
from .codec import deserialize, serialize
from .difficulty import DifficultyAdapter, find_hint_pair
from .match import MatchEvaluator
from .models import (
    Adjustment,
    MatchOutcome,
    Position,
    SelectedPosition,
    SessionConfig,
    SessionState,
    Tile,
)
from .stats import SessionStats

logger = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    One play-through, from board initialization to completion.

    Ties the board, evaluator, statistics and difficulty adapter together
    and implements the selection flow: the first tile picked is held, picking
    it again releases it, and picking a second tile evaluates the pair.

    Attributes:
        config: Session settings
        board: The live board (sole owner of the grid)
        stats: Score, history and play clock
        adapter: Difficulty state machine and inactivity watchdog
        evaluator: Match evaluator (wraps a PathFinder)
        selected: Position of the held tile, if any
        last_adjustment: Adjustment emitted by the most recent evaluation
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: SessionConfig
    board: Board
    stats: SessionStats = Field(default_factory=SessionStats)
    adapter: DifficultyAdapter = Field(default_factory=DifficultyAdapter)
    evaluator: MatchEvaluator = Field(default_factory=MatchEvaluator)
    selected: Optional[Position] = None
    last_adjustment: Adjustment = "none"

    @classmethod
    def create(
        cls,
        config: SessionConfig,
        tiles: Sequence[Tile],
        seed: Optional[int] = None,
        **kwargs: Any,
    ) -> "GameSession":
        """
        Lay out `tiles` on a board sized by `config` and return a new session.

        Raises:
            SizeMismatch: If the tile count does not fill the board
        """
        board = Board(seed=seed)
        board.init_board(config.board_size.rows, config.board_size.cols, tiles)
        return cls(config=config, board=board, **kwargs)

    def start(self) -> None:
        """Start the play clock and inactivity detection."""
        self.stats.start_timer()
        self.adapter.start_inactivity_detection()

    def close(self) -> None:
        """Pause the clock and stop the watchdog."""
        self.stats.pause_timer()
        self.adapter.stop_inactivity_detection()

    @property
    def is_complete(self) -> bool:
        return self.board.is_complete()

    def select(self, pos: Position) -> Optional[MatchOutcome]:
        """
        Handle a tile pick.

        Returns:
            The MatchOutcome when this pick completes a pair selection,
            otherwise None (empty cell, first pick, or deselection)
        """
        pos = Position(*pos)
        tile = self.board.get_tile_at(pos)
        if tile is None:
            return None

        if self.selected is None:
            self.selected = pos
            return None

        if self.selected == pos:
            self.selected = None
            return None

        first_pos, self.selected = self.selected, None
        first = self.board.get_tile_at(first_pos)
        if first is None:
            # Stale selection restored from a saved state
            self.selected = pos
            return None
        return self._evaluate(first, tile, first_pos, pos)

    def _evaluate(self, first: Tile, second: Tile, first_pos: Position, second_pos: Position) -> MatchOutcome:
        outcome = self.evaluator.evaluate(first, second, first_pos, second_pos, self.board.snapshot())

        meaning = first.meaning if first.kind == "Meaning" else second.meaning
        self.stats.record_match(first.word, meaning, outcome.is_success)
        self.last_adjustment = self.adapter.record_outcome(outcome.is_success)

        if outcome.is_success:
            self.board.remove_pair(first_pos, second_pos)
            if self.board.is_complete():
                logger.info("Board cleared")
                self.close()
        else:
            logger.debug(f"Selection {first_pos} -> {second_pos} failed: {outcome.result}")

        return outcome

    def hint(self) -> Optional[Tuple[Position, Position]]:
        """A currently connectable matching pair, if one exists."""
        return find_hint_pair(self.board.snapshot(), self.evaluator.pathfinder)

    def autoplay(self, max_moves: Optional[int] = None) -> List[MatchOutcome]:
        """
        Clear the board by repeatedly playing hint pairs.

        Stops when the board is complete, no connectable pair remains, or
        `max_moves` selections have been evaluated.
        """
        outcomes: List[MatchOutcome] = []
        self.selected = None
        while not self.is_complete and (max_moves is None or len(outcomes) < max_moves):
            pair = self.hint()
            if pair is None:
                logger.info(f"No connectable pair left, {self.board.remaining_tiles} tiles remain")
                break
            self.select(pair[0])
            outcomes.append(self.select(pair[1]))
        return outcomes

    def get_state(self) -> SessionState:
        """Snapshot the whole session for serialization."""
        selected = None
        if self.selected is not None:
            selected = SelectedPosition(row=self.selected.row, col=self.selected.col)

        return SessionState(
            config=self.config.model_copy(deep=True),
            board=self.board.snapshot(),
            score=self.stats.get_score(),
            elapsed_seconds=self.stats.elapsed_seconds,
            selected_position=selected,
            is_complete=self.board.is_complete(),
        )

    @classmethod
    def from_state(cls, state: SessionState, **kwargs: Any) -> "GameSession":
        """Rebuild a session from a snapshot. The clock comes back paused."""
        session = cls(
            config=state.config.model_copy(deep=True),
            board=Board.from_snapshot(state.board),
            **kwargs,
        )
        session.stats.restore_from_state(state.score, state.elapsed_seconds)
        if state.selected_position is not None:
            session.selected = Position(state.selected_position.row, state.selected_position.col)
        return session

    def save(self, path: str | FilePath) -> FilePath:
        """Write the serialized state to `path`, creating parent directories."""
        path = FilePath(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(serialize(self.get_state()))
        return path

    @classmethod
    def load(cls, path: str | FilePath, **kwargs: Any) -> "GameSession":
        """
        Restore a session from a file written by `save`.

        Raises:
            MalformedInput: If the file is not a JSON object
            StateValidationError: If any field fails validation
        """
        with open(path, encoding="utf-8") as f:
            return cls.from_state(deserialize(f.read()), **kwargs)
