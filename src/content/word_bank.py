import random
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import Language, Level, Tile
from .data import WORD_BANKS
from .models import WordEntry
from .tiles import build_tile_pairs


class LocalWordBank(BaseModel):
    """
    Offline content source used when the AI service is unavailable.

    Words for the requested theme come first; if the theme runs short the
    other themes fill in, and entries repeat only once the whole bank for
    the language is used up.

    Attributes:
        banks: Word lists keyed by language, then theme
        seed: Optional random seed for reproducible selection
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    banks: Dict[str, Dict[str, List[Dict[str, str]]]] = Field(default_factory=lambda: WORD_BANKS)
    seed: Optional[int] = None
    _rng: random.Random = None
    _batch: int = 0

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def available_themes(self, language: Language) -> List[str]:
        return list(self.banks.get(language, {}).keys())

    def get_entries(self, language: Language, theme: str, count: int) -> List[WordEntry]:
        """Pick `count` entries, preferring the requested theme."""
        bank = self.banks.get(language, {})
        themed = list(bank.get(theme.lower(), []))
        others = [entry for name, entries in bank.items() if name != theme.lower() for entry in entries]

        self._rng.shuffle(themed)
        self._rng.shuffle(others)
        pool = themed + others
        if not pool:
            return []

        selected = pool[:count]
        while len(selected) < count:
            refill = list(pool)
            self._rng.shuffle(refill)
            selected.extend(refill[:count - len(selected)])

        return [WordEntry(**entry) for entry in selected]

    def get_words(self, language: Language, level: Level, theme: str, count: int) -> List[Tile]:
        """
        Build `count` tile pairs from the local lists.

        The level is accepted for interface parity with the AI source; the
        bundled lists are not graded by difficulty.
        """
        entries = self.get_entries(language, theme, count)
        self._batch += 1
        return build_tile_pairs(entries, prefix=f"local{self._batch}")
