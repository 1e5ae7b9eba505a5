"""Board and tile builders shared by the test modules."""

from typing import List, Optional

from src.engine import BoardSnapshot, Tile


def make_pairs(count: int, prefix: str = "p") -> List[Tile]:
    """Build `count` complete Word/Meaning pairs."""
    tiles = []
    for i in range(count):
        pair_id = f"{prefix}{i}"
        tiles.append(Tile(id=f"w_{pair_id}", word=f"word{i}", meaning=f"meaning{i}",
                          hint=f"hint{i}", kind="Word", pair_id=pair_id))
        tiles.append(Tile(id=f"m_{pair_id}", word=f"word{i}", meaning=f"meaning{i}",
                          hint=f"hint{i}", kind="Meaning", pair_id=pair_id))
    return tiles


def snapshot_from(layout: List[str]) -> BoardSnapshot:
    """
    Build a snapshot from rows of characters.

    An uppercase letter is the Word tile of a pair, the same lowercase letter
    its Meaning tile, '#' an unrelated blocking tile and '.' an empty cell.
    """
    grid = []
    blockers = 0
    for r, line in enumerate(layout):
        row: List[Optional[Tile]] = []
        for c, ch in enumerate(line):
            if ch == ".":
                row.append(None)
            elif ch == "#":
                blockers += 1
                row.append(Tile(id=f"block{blockers}", word="x", meaning="x", hint="x",
                                kind="Word", pair_id=f"block{blockers}"))
            else:
                kind = "Word" if ch.isupper() else "Meaning"
                row.append(Tile(id=f"{ch}_{r}_{c}", word=ch.upper(), meaning=ch.lower(),
                                hint="h", kind=kind, pair_id=ch.upper()))
        grid.append(tuple(row))
    return BoardSnapshot(rows=len(layout), cols=len(layout[0]), grid=tuple(grid))


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


class FakeTimerFactory:
    """Records every timer the watchdog creates."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def latest(self) -> FakeTimer:
        return self.timers[-1]
