import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .errors import BoardNotInitialized, SizeMismatch
from .models import BoardSize, BoardSnapshot, Language, Level, Position, SessionConfig, Tile

logger = logging.getLogger(__name__)


# Board dimensions per difficulty level
DIFFICULTY_BOARD_SIZES: Dict[str, BoardSize] = {
    "easy": BoardSize(rows=4, cols=4),
    "medium": BoardSize(rows=6, cols=6),
    "hard": BoardSize(rows=8, cols=8),
}

AVAILABLE_THEMES = ("learning", "virtue", "growth", "technology")


def board_size_for(level: Level) -> BoardSize:
    """Board dimensions for a difficulty level."""
    return DIFFICULTY_BOARD_SIZES[level].model_copy()


def pair_count(size: BoardSize) -> int:
    """Number of tile pairs that fill a board of the given size."""
    return (size.rows * size.cols) // 2


def create_session_config(
    language: Language = "zh",
    level: Level = "easy",
    theme: str = "learning",
) -> SessionConfig:
    """Build a session config whose board size follows from the level."""
    return SessionConfig(
        language_mode=language,
        difficulty_level=level,
        theme=theme,
        board_size=board_size_for(level),
    )


class Board(BaseModel):
    """
    Owns the tile grid for one session.

    The grid is private: other components read it through `snapshot()`
    and every mutation goes through `remove_tile` / `remove_pair`.

    Attributes:
        seed: Optional random seed for reproducible shuffles
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    _rng: random.Random = None
    _grid: List[List[Optional[Tile]]] = None
    _rows: int = 0
    _cols: int = 0
    _remaining: int = 0

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and an empty grid."""
        self._rng = random.Random(self.seed)
        self._grid = []

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot, seed: Optional[int] = None) -> "Board":
        board = cls(seed=seed)
        board.restore(snapshot)
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> BoardSize:
        return BoardSize(rows=self._rows, cols=self._cols)

    @property
    def remaining_tiles(self) -> int:
        """Number of tiles still on the board."""
        return self._remaining

    def init_board(self, rows: int, cols: int, tiles: Sequence[Tile]) -> None:
        """
        Shuffle the tiles and lay them out row-major.

        Args:
            rows: Number of rows
            cols: Number of columns
            tiles: Exactly rows*cols tiles

        Raises:
            SizeMismatch: If the tile count differs from the cell count, or
                the cell count is odd
        """
        total_cells = rows * cols
        if rows <= 0 or cols <= 0:
            raise SizeMismatch(rows, cols, len(tiles), reason=f"Board dimensions must be positive, got {rows}x{cols}")
        if total_cells % 2:
            raise SizeMismatch(rows, cols, len(tiles), reason=f"Board {rows}x{cols} has an odd number of cells")
        if len(tiles) != total_cells:
            raise SizeMismatch(rows, cols, len(tiles))

        shuffled = self._shuffle(list(tiles))

        self._rows = rows
        self._cols = cols
        self._grid = [shuffled[r * cols:(r + 1) * cols] for r in range(rows)]
        self._remaining = total_cells
        logger.debug(f"Board initialized: {rows}x{cols}, {total_cells // 2} pairs")

    def _shuffle(self, tiles: List[Tile]) -> List[Tile]:
        """Fisher-Yates shuffle in place."""
        for i in range(len(tiles) - 1, 0, -1):
            j = self._rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]
        return tiles

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_tile_at(self, pos: Position) -> Optional[Tile]:
        """Tile at pos, or None if the cell is empty or out of bounds."""
        if not self.in_bounds(pos):
            return None
        row, col = pos
        return self._grid[row][col]

    def remove_tile(self, pos: Position) -> None:
        """Clear a cell. Removing an empty or out-of-bounds cell does nothing."""
        if self.get_tile_at(pos) is None:
            return
        row, col = pos
        self._grid[row][col] = None
        self._remaining -= 1

    def remove_pair(self, first: Position, second: Position) -> None:
        self.remove_tile(first)
        self.remove_tile(second)

    def is_complete(self) -> bool:
        """True once every tile has been removed."""
        return self._remaining == 0

    def tile_positions(self) -> List[Position]:
        """Positions of all remaining tiles, row-major."""
        return [
            Position(r, c)
            for r in range(self._rows)
            for c in range(self._cols)
            if self._grid[r][c] is not None
        ]

    def snapshot(self) -> BoardSnapshot:
        """
        Immutable copy of the current layout.

        Raises:
            BoardNotInitialized: If no grid has been laid out yet
        """
        if not self._grid:
            raise BoardNotInitialized("Board has no grid; call init_board or restore first")
        return BoardSnapshot(
            rows=self._rows,
            cols=self._cols,
            grid=tuple(tuple(row) for row in self._grid),
        )

    def restore(self, snapshot: BoardSnapshot) -> None:
        """
        Replace the layout with a copy of `snapshot`.

        The live-tile counter is recomputed from the grid contents.
        """
        self._rows = snapshot.rows
        self._cols = snapshot.cols
        self._grid = [list(row) for row in snapshot.grid]
        self._remaining = sum(1 for row in self._grid for cell in row if cell is not None)


def tiles_by_pair(tiles: Iterable[Tile]) -> Dict[str, List[Tile]]:
    """Group tiles by pair_id."""
    groups: Dict[str, List[Tile]] = {}
    for tile in tiles:
        groups.setdefault(tile.pair_id, []).append(tile)
    return groups
