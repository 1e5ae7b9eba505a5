"""Bundled word lists for the local word bank."""

from .words import ZH_IDIOMS, EN_WORDS, WORD_BANKS

__all__ = ["ZH_IDIOMS", "EN_WORDS", "WORD_BANKS"]
