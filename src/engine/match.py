"""Match evaluation: reachability first, then tile content."""

from typing import Dict, Optional

from .models import BoardSnapshot, FailureReason, Language, MatchOutcome, Path, Position, Tile
from .pathfinder import PathFinder


FAILURE_MESSAGES: Dict[Language, Dict[FailureReason, str]] = {
    "zh": {
        "path_failure": "无法连接：两张卡片之间没有有效路径",
        "content_failure": "匹配错误：这两张卡片不是一对",
    },
    "en": {
        "path_failure": "No valid path: Cannot connect these two cards",
        "content_failure": "Mismatch: These cards are not a pair",
    },
}


class MatchEvaluator:
    """
    Classifies a two-tile selection as success, path failure or content failure.

    A missing path wins over a content mismatch, so callers can tell
    "nothing was reachable" apart from "reachable but not a pair".
    """

    def __init__(self, pathfinder: Optional[PathFinder] = None):
        self.pathfinder = pathfinder or PathFinder()

    def evaluate(
        self,
        tile_a: Tile,
        tile_b: Tile,
        pos_a: Position,
        pos_b: Position,
        board: BoardSnapshot,
    ) -> MatchOutcome:
        path = self.pathfinder.find_path(pos_a, pos_b, board)
        if path is None:
            return MatchOutcome(result="path_failure")

        if not self.is_content_match(tile_a, tile_b):
            return MatchOutcome(result="content_failure", path=path)

        return MatchOutcome(result="success", path=path)

    @staticmethod
    def is_content_match(tile_a: Tile, tile_b: Tile) -> bool:
        """Same pair_id and one Word tile plus one Meaning tile."""
        return tile_a.pair_id == tile_b.pair_id and tile_a.kind != tile_b.kind

    def check_path(self, pos_a: Position, pos_b: Position, board: BoardSnapshot) -> Optional[Path]:
        return self.pathfinder.find_path(pos_a, pos_b, board)

    @staticmethod
    def failure_message(reason: FailureReason, language: Language = "en") -> str:
        """User-facing explanation for a failed match."""
        return FAILURE_MESSAGES[language].get(reason, "Unknown error")
