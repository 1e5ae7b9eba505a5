"""
Tests for the turn-limited connection search.

Layouts are written as strings: an uppercase letter is the Word tile of a
pair, the same lowercase letter its Meaning tile, '#' is an unrelated
blocking tile and '.' an empty cell.
"""

import random
from typing import Optional

import pytest

from src.engine import BoardSnapshot, Path, PathFinder, Position, Tile

from .helpers import snapshot_from


def reference_connectable(board: BoardSnapshot, start: Position, end: Position) -> bool:
    """
    Independent check: a path of at most two turns is a three-segment
    polyline start -> c1 -> c2 -> end whose middle segment runs along some
    row (or column) of the board extended by one ring.
    """
    if start == end:
        return False

    def passable(cell):
        if cell == end:
            return True
        r, c = cell
        if r < -1 or r > board.rows or c < -1 or c > board.cols:
            return False
        if not board.in_bounds(Position(r, c)):
            return True
        return board.grid[r][c] is None

    def cells_between(a, b):
        (ar, ac), (br, bc) = a, b
        cells = []
        if ar == br:
            step = 1 if bc > ac else -1
            cells = [(ar, c) for c in range(ac + step, bc + step, step)] if ac != bc else []
        else:
            step = 1 if br > ar else -1
            cells = [(r, ac) for r in range(ar + step, br + step, step)]
        return cells

    def clear(points):
        cells = []
        for a, b in zip(points, points[1:]):
            cells.extend(cells_between(a, b))
        return all(passable(cell) for cell in cells)

    sr, sc = start
    er, ec = end
    for r in range(-1, board.rows + 1):
        if clear([(sr, sc), (r, sc), (r, ec), (er, ec)]):
            return True
    for c in range(-1, board.cols + 1):
        if clear([(sr, sc), (sr, c), (er, c), (er, ec)]):
            return True
    return False


def find(layout, start, end) -> Optional[Path]:
    return PathFinder().find_path(Position(*start), Position(*end), snapshot_from(layout))


class TestBasicPaths:
    """Straight, one-turn and two-turn connections."""

    def test_same_position_has_no_path(self):
        assert find(["A.", ".a"], (0, 0), (0, 0)) is None

    def test_adjacent_tiles(self):
        path = find(["Aa"], (0, 0), (0, 1))
        assert path.points == [Position(0, 0), Position(0, 1)]
        assert path.turns == 0

    def test_straight_line(self):
        path = find(["A..a"], (0, 0), (0, 3))
        assert path.turns == 0
        assert path.points == [Position(0, c) for c in range(4)]

    def test_one_turn(self):
        path = find(["A..", ".#.", "..a"], (0, 0), (2, 2))
        assert path.turns == 1
        assert path.points[0] == Position(0, 0)
        assert path.points[-1] == Position(2, 2)

    def test_two_turns_around_border(self):
        """A blocker between the pair forces a route outside the board."""
        path = find(["A#a"], (0, 0), (0, 2))
        assert path is not None
        assert path.turns == 2
        assert any(p.row in (-1, 1) for p in path.points)

    def test_opposite_corners_of_empty_board(self):
        layout = ["A...", "....", "....", "...a"]
        path = find(layout, (0, 0), (3, 3))
        assert path is not None
        assert path.turns <= 2

    def test_full_board_corners_route_outside(self):
        layout = ["A##a", "####", "####", "####"]
        path = find(layout, (0, 0), (0, 3))
        assert path is not None
        assert path.turns == 2
        assert all(p.row == -1 for p in path.points[1:-1])


class TestNoPath:
    """Configurations with no legal connection."""

    def test_enclosed_tile(self):
        layout = [
            "a....",
            "..#..",
            ".#A#.",
            "..#..",
            ".....",
        ]
        assert find(layout, (2, 2), (0, 0)) is None

    def test_three_turns_required(self):
        layout = [
            "A#.",
            "##.",
            "#a.",
        ]
        assert find(layout, (0, 0), (2, 1)) is None

    def test_no_path_is_symmetric(self):
        layout = [
            "A#.",
            "##.",
            "#a.",
        ]
        assert find(layout, (2, 1), (0, 0)) is None


class TestPassability:
    """Which cells the search may enter."""

    def setup_method(self):
        self.board = snapshot_from(["A.", "#a"])
        self.end = Position(1, 1)

    def test_destination_always_passable(self):
        assert PathFinder.is_passable(self.end, self.end, self.board)

    def test_occupied_cell_blocked(self):
        assert not PathFinder.is_passable(Position(1, 0), self.end, self.board)

    def test_empty_cell_open(self):
        assert PathFinder.is_passable(Position(0, 1), self.end, self.board)

    @pytest.mark.parametrize("pos", [Position(-1, 0), Position(0, 2), Position(2, 1), Position(1, -1), Position(-1, -1)])
    def test_border_ring_open(self, pos):
        assert PathFinder.is_passable(pos, self.end, self.board)

    @pytest.mark.parametrize("pos", [Position(-2, 0), Position(0, 3), Position(3, 1), Position(1, -2)])
    def test_beyond_ring_closed(self, pos):
        assert not PathFinder.is_passable(pos, self.end, self.board)


class TestPathHelpers:
    """is_valid_path, count_turns and simplify_path."""

    def test_is_valid_path(self):
        finder = PathFinder()
        assert finder.is_valid_path(Path(points=[Position(0, 0), Position(0, 1)], turns=0))
        assert not finder.is_valid_path(None)

    def test_path_rejects_more_than_two_turns(self):
        with pytest.raises(ValueError):
            Path(points=[Position(0, 0), Position(0, 1)], turns=3)

    def test_path_requires_two_points(self):
        with pytest.raises(ValueError):
            Path(points=[Position(0, 0)], turns=0)

    def test_count_turns(self):
        points = [Position(0, 0), Position(-1, 0), Position(-1, 1), Position(-1, 2), Position(0, 2)]
        assert PathFinder.count_turns(points) == 2

    def test_simplify_keeps_turning_points(self):
        finder = PathFinder()
        path = find(["A##a"], (0, 0), (0, 3))
        simplified = finder.simplify_path(path)

        assert simplified.points == [Position(0, 0), Position(-1, 0), Position(-1, 3), Position(0, 3)]
        assert simplified.turns == path.turns

    def test_simplify_straight_path(self):
        finder = PathFinder()
        path = find(["A..a"], (0, 0), (0, 3))
        assert finder.simplify_path(path).points == [Position(0, 0), Position(0, 3)]

    def test_simplify_two_point_path_unchanged(self):
        finder = PathFinder()
        path = Path(points=[Position(0, 0), Position(0, 1)], turns=0)
        assert finder.simplify_path(path) == path


class TestAgainstReference:
    """Compare the search with an independent segment-based check."""

    @pytest.mark.parametrize("seed", range(40))
    def test_random_boards(self, seed):
        rng = random.Random(seed)
        rows, cols = rng.randint(2, 6), rng.randint(2, 6)
        density = rng.choice([0.3, 0.6, 0.9])
        layout = ["".join("#" if rng.random() < density else "." for _ in range(cols)) for _ in range(rows)]
        board = snapshot_from(layout)
        finder = PathFinder()

        cells = [Position(r, c) for r in range(rows) for c in range(cols)]
        for _ in range(15):
            start, end = rng.sample(cells, 2)
            # Endpoints are tiles being connected, so they must be occupied
            grid = [list(row) for row in board.grid]
            for pos in (start, end):
                grid[pos.row][pos.col] = Tile(id=f"t{pos.row}{pos.col}", word="w", meaning="m",
                                              hint="h", kind="Word", pair_id="p")
            probe = BoardSnapshot(rows=rows, cols=cols, grid=tuple(tuple(row) for row in grid))

            path = finder.find_path(start, end, probe)
            assert (path is not None) == reference_connectable(probe, start, end)
            if path is not None:
                assert path.turns <= 2
                assert path.points[0] == start and path.points[-1] == end
                assert finder.count_turns(path.points) == path.turns
                for a, b in zip(path.points, path.points[1:]):
                    assert abs(a.row - b.row) + abs(a.col - b.col) == 1
                for p in path.points[1:-1]:
                    assert PathFinder.is_passable(p, end, probe)
