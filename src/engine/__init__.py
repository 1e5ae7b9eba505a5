"""Core game engine for word connect."""

from .models import (
    Language,
    Level,
    TileKind,
    Adjustment,
    Position,
    Tile,
    BoardSize,
    BoardSnapshot,
    Path,
    MatchOutcome,
    SessionConfig,
    Score,
    SelectedPosition,
    SessionState,
    MatchRecord,
    GameResult,
    DifficultyState,
)
from .errors import (
    WordConnectError,
    SizeMismatch,
    BoardNotInitialized,
    MalformedInput,
    StateValidationError,
    ContentSupplyFailure,
)
from .board import (
    Board,
    DIFFICULTY_BOARD_SIZES,
    AVAILABLE_THEMES,
    board_size_for,
    pair_count,
    create_session_config,
)
from .pathfinder import PathFinder, MAX_TURNS
from .match import MatchEvaluator
from .stats import SessionStats
from .difficulty import (
    DifficultyAdapter,
    InactivityWatchdog,
    CONSECUTIVE_THRESHOLD,
    INACTIVITY_TIMEOUT,
    find_hint_pair,
)
from .codec import serialize, deserialize, states_equal
from .session import GameSession

__all__ = [
    # Models
    "Language",
    "Level",
    "TileKind",
    "Adjustment",
    "Position",
    "Tile",
    "BoardSize",
    "BoardSnapshot",
    "Path",
    "MatchOutcome",
    "SessionConfig",
    "Score",
    "SelectedPosition",
    "SessionState",
    "MatchRecord",
    "GameResult",
    "DifficultyState",
    # Errors
    "WordConnectError",
    "SizeMismatch",
    "BoardNotInitialized",
    "MalformedInput",
    "StateValidationError",
    "ContentSupplyFailure",
    # Board
    "Board",
    "DIFFICULTY_BOARD_SIZES",
    "AVAILABLE_THEMES",
    "board_size_for",
    "pair_count",
    "create_session_config",
    # Matching
    "PathFinder",
    "MAX_TURNS",
    "MatchEvaluator",
    # Session tracking
    "SessionStats",
    "DifficultyAdapter",
    "InactivityWatchdog",
    "CONSECUTIVE_THRESHOLD",
    "INACTIVITY_TIMEOUT",
    "find_hint_pair",
    # Serialization
    "serialize",
    "deserialize",
    "states_equal",
    "GameSession",
]
