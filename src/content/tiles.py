"""Conversion of word entries into tile pairs, and tile-set checks."""

from typing import List, Sequence

from ..engine.board import tiles_by_pair
from ..engine.models import Tile
from .models import WordEntry


def build_tile_pairs(entries: Sequence[WordEntry], prefix: str) -> List[Tile]:
    """
    Turn each entry into a Word tile and a Meaning tile sharing a pair id.

    Args:
        entries: Word entries, one per pair
        prefix: Prefix making pair ids unique to this batch (e.g. "ai_3f2a")

    Returns:
        2 * len(entries) tiles, Word tile first within each pair
    """
    tiles: List[Tile] = []
    for index, entry in enumerate(entries):
        pair_id = f"{prefix}_pair_{index}"
        for kind in ("Word", "Meaning"):
            tiles.append(Tile(
                id=f"{kind.lower()}_{pair_id}",
                word=entry.word,
                meaning=entry.meaning,
                hint=entry.hint,
                confuse=entry.confuse or None,
                kind=kind,
                pair_id=pair_id,
            ))
    return tiles


def validate_tile_set(tiles: Sequence[Tile], pair_count: int) -> List[str]:
    """
    Check that `tiles` form exactly `pair_count` complete pairs.

    Returns:
        A list of problems; empty when the set is usable
    """
    problems: List[str] = []

    if len(tiles) != 2 * pair_count:
        problems.append(f"Expected {2 * pair_count} tiles, got {len(tiles)}")

    ids = [tile.id for tile in tiles]
    if len(set(ids)) != len(ids):
        problems.append("Tile ids are not unique")

    for pair_id, group in tiles_by_pair(tiles).items():
        kinds = sorted(tile.kind for tile in group)
        if kinds != ["Meaning", "Word"]:
            problems.append(f"Pair '{pair_id}' must have one Word and one Meaning tile, got {kinds}")

    return problems
