"""
Pydantic models for the content layer.

Covers LLM messages, configuration for the LLM-backed content service, and
the entries that content sources turn into tile pairs.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# Type aliases
Role = Literal["system", "user", "assistant"]
ContentSource = Literal["ai", "local"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class WordEntry(BaseModel):
    """A word with its meaning, as produced by a content source."""
    word: str = Field(..., min_length=1)
    meaning: str = Field(..., min_length=1)
    hint: str = Field(..., min_length=1)
    confuse: Optional[str] = None


class LLMConfig(BaseModel):
    """Configuration for the LLM behind the content service."""
    model_config = ConfigDict(extra='allow')

    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: Optional[int] = 2000
    max_retries: int = Field(default=1, ge=0)
    # Additional kwargs are allowed and passed to LiteLLM
