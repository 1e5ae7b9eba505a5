"""
Connection search between two tiles.

Two tiles connect when an orthogonal polyline with at most two turns joins
them through empty cells. The search may leave the board by one cell on any
side so pairs on the edge can be linked "around the outside".
"""

from collections import deque
from typing import Deque, List, NamedTuple, Optional, Sequence, Set, Tuple

from .models import BoardSnapshot, Path, Position


MAX_TURNS = 2

# Up, down, left, right
DIRECTIONS: Tuple[Position, ...] = (
    Position(-1, 0),
    Position(1, 0),
    Position(0, -1),
    Position(0, 1),
)


class _Node(NamedTuple):
    position: Position
    direction: Optional[int]  # None at the start cell
    turns: int
    trail: Tuple[Position, ...]


def _step_direction(src: Position, dst: Position) -> Tuple[int, int]:
    return ((dst.row > src.row) - (dst.row < src.row), (dst.col > src.col) - (dst.col < src.col))


class PathFinder:
    """
    Breadth-first search over (position, direction, turns) states.

    Position alone is not enough to prune on: reaching a cell with a
    different heading or turn count can still complete where the first
    arrival could not.
    """

    def find_path(self, start: Position, end: Position, board: BoardSnapshot) -> Optional[Path]:
        """
        Find a path of at most two turns from `start` to `end`.

        Args:
            start: Position of the first tile
            end: Position of the second tile
            board: Snapshot of the current layout

        Returns:
            The traversed Path, or None if no legal connection exists
        """
        start, end = Position(*start), Position(*end)
        if start == end:
            return None

        queue: Deque[_Node] = deque([_Node(start, None, 0, (start,))])
        visited: Set[Tuple[Position, int, int]] = set()

        while queue:
            position, direction, turns, trail = queue.popleft()

            for d, (dr, dc) in enumerate(DIRECTIONS):
                nxt = Position(position.row + dr, position.col + dc)
                new_turns = turns if direction is None or d == direction else turns + 1
                if new_turns > MAX_TURNS:
                    continue

                if nxt == end:
                    return Path(points=[*trail, end], turns=new_turns)

                if not self.is_passable(nxt, end, board):
                    continue

                key = (nxt, d, new_turns)
                if key in visited:
                    continue
                visited.add(key)
                queue.append(_Node(nxt, d, new_turns, trail + (nxt,)))

        return None

    @staticmethod
    def is_passable(pos: Position, end: Position, board: BoardSnapshot) -> bool:
        """
        Whether the search may step onto `pos`.

        The destination is always enterable. Cells in the single ring around
        the board are open; anything further out is closed. On the board,
        only empty cells are open.
        """
        if pos == end:
            return True

        row, col = pos
        if row < -1 or row > board.rows or col < -1 or col > board.cols:
            return False

        if not board.in_bounds(pos):
            return True

        return board.grid[row][col] is None

    @staticmethod
    def is_valid_path(path: Optional[Path]) -> bool:
        if path is None or len(path.points) < 2:
            return False
        return path.turns <= MAX_TURNS

    @staticmethod
    def count_turns(points: Sequence[Position]) -> int:
        """Number of direction changes along consecutive points."""
        turns = 0
        for prev, curr, nxt in zip(points, points[1:], points[2:]):
            if _step_direction(prev, curr) != _step_direction(curr, nxt):
                turns += 1
        return turns

    def simplify_path(self, path: Path) -> Path:
        """Drop collinear interior points, keeping the endpoints and the turning points."""
        if len(path.points) <= 2:
            return path

        points = path.points
        simplified: List[Position] = [points[0]]
        for prev, curr, nxt in zip(points, points[1:], points[2:]):
            if _step_direction(prev, curr) != _step_direction(curr, nxt):
                simplified.append(curr)
        simplified.append(points[-1])

        return Path(points=simplified, turns=self.count_turns(points))
