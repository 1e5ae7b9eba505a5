"""
Data models for the word-connect engine.

Wire-facing models (everything reachable from SessionState) serialize with
camelCase field names; Python code uses the snake_case attribute names.
"""

import math
from typing import Annotated, List, NamedTuple, Optional, Literal, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel


# Type aliases
Language = Literal["zh", "en"]
Level = Literal["easy", "medium", "hard"]
TileKind = Literal["Word", "Meaning"]
MatchResult = Literal["success", "path_failure", "content_failure"]
FailureReason = Literal["path_failure", "content_failure"]
Adjustment = Literal["increase", "decrease", "none"]

PositiveInt = Annotated[int, Field(strict=True, gt=0)]
Count = Annotated[int, Field(strict=True, ge=0)]


class Position(NamedTuple):
    """A grid cell, 0-based. Path points may lie one ring outside the board."""
    row: int
    col: int


class WireModel(BaseModel):
    """Base for models that appear in the serialized session state."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Tile(WireModel):
    """A single playable card. Two tiles with the same pair_id and opposite kind form a pair."""
    model_config = ConfigDict(frozen=True)

    id: StrictStr
    word: StrictStr
    meaning: StrictStr
    hint: StrictStr
    confuse: Optional[StrictStr] = None
    kind: TileKind
    pair_id: StrictStr

    @model_serializer(mode="wrap")
    def _drop_missing_confuse(self, handler):
        data = handler(self)
        if self.confuse is None:
            data.pop("confuse", None)
        return data


class BoardSize(WireModel):
    rows: PositiveInt
    cols: PositiveInt


class BoardSnapshot(WireModel):
    """
    Immutable copy of a board's layout.

    This is the value handed to PathFinder and MatchEvaluator; the live
    Board is never shared with them.
    """
    model_config = ConfigDict(frozen=True)

    rows: PositiveInt
    cols: PositiveInt
    grid: Tuple[Tuple[Optional[Tile], ...], ...]

    @model_validator(mode="after")
    def _check_grid_shape(self) -> "BoardSnapshot":
        if len(self.grid) != self.rows:
            raise ValueError(f"grid must have {self.rows} rows (found {len(self.grid)})")
        for r, row in enumerate(self.grid):
            if len(row) != self.cols:
                raise ValueError(f"grid[{r}] must have {self.cols} columns (found {len(row)})")
        return self

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile_at(self, pos: Position) -> Optional[Tile]:
        """Tile at pos, or None when the cell is empty or off the board."""
        if not self.in_bounds(pos):
            return None
        row, col = pos
        return self.grid[row][col]

    def occupied(self) -> List[Tuple[Position, Tile]]:
        """All (position, tile) pairs in row-major order."""
        return [
            (Position(r, c), tile)
            for r, row in enumerate(self.grid)
            for c, tile in enumerate(row)
            if tile is not None
        ]


class Path(BaseModel):
    """Polyline joining two tiles. `turns` counts direction changes (0-2)."""
    points: List[Position] = Field(..., min_length=2)
    turns: int = Field(..., ge=0, le=2)


class MatchOutcome(BaseModel):
    """
    Result of evaluating a two-tile selection.

    Failures are ordinary values. A content failure still carries the path
    that was found; a path failure never has one.
    """
    result: MatchResult
    path: Optional[Path] = None

    @model_validator(mode="after")
    def _path_matches_result(self) -> "MatchOutcome":
        if self.result == "path_failure" and self.path is not None:
            raise ValueError("path_failure outcomes carry no path")
        if self.result != "path_failure" and self.path is None:
            raise ValueError(f"{self.result} outcomes require a path")
        return self

    @property
    def is_success(self) -> bool:
        return self.result == "success"

    @property
    def failure_reason(self) -> Optional[FailureReason]:
        return None if self.result == "success" else self.result


class SessionConfig(WireModel):
    """Settings chosen at the start of a session."""
    language_mode: Language
    difficulty_level: Level
    theme: Annotated[str, Field(strict=True, min_length=1)]
    board_size: BoardSize


class Score(WireModel):
    correct: Count = 0
    wrong: Count = 0


class SelectedPosition(WireModel):
    row: Count
    col: Count


class SessionState(WireModel):
    """Point-in-time snapshot of a whole session; the serialized form."""
    config: SessionConfig
    board: BoardSnapshot
    score: Score
    elapsed_seconds: float = Field(..., ge=0)
    selected_position: Optional[SelectedPosition]
    is_complete: StrictBool

    @field_validator("elapsed_seconds", mode="before")
    @classmethod
    def _elapsed_is_number(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a non-negative number")
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError("must be a finite number")
        return value


class MatchRecord(WireModel):
    """One evaluated selection, kept in the session history."""
    word: str
    meaning: str
    is_correct: bool
    timestamp: float


class GameResult(WireModel):
    """Final statistics projected from SessionStats."""
    correct: int
    wrong: int
    duration_seconds: float
    match_history: List[MatchRecord] = Field(default_factory=list)


class DifficultyState(WireModel):
    """Serializable part of the difficulty adapter (no live timer)."""
    consecutive_correct: Count = 0
    consecutive_wrong: Count = 0
    last_action_timestamp: float = 0.0
