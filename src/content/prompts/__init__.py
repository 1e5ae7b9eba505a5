"""Prompt templates for the word content service."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .content_prompt import (
    LEVEL_DESCRIPTIONS,
    build_generation_prompt,
    build_explanation_prompt,
    build_summary_prompt,
)

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "LEVEL_DESCRIPTIONS",
    "build_generation_prompt",
    "build_explanation_prompt",
    "build_summary_prompt",
]
