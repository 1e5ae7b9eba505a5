"""Word content supply: LLM generation with a local word-bank fallback."""

from .models import Message, Role, ContentSource, WordEntry, LLMConfig
from .llm_client import LLMClient
from .tiles import build_tile_pairs, validate_tile_set
from .word_bank import LocalWordBank
from .service import ContentService, parse_word_entries

__all__ = [
    "Message",
    "Role",
    "ContentSource",
    "WordEntry",
    "LLMConfig",
    "LLMClient",
    "build_tile_pairs",
    "validate_tile_set",
    "LocalWordBank",
    "ContentService",
    "parse_word_entries",
]
