"""
Word content supply for new sessions.

Content comes from an LLM first and from the bundled word bank when the
LLM is not configured or fails. Explanations and summaries likewise fall
back to locally built text.
"""

import json
import logging
import re
import uuid
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..engine.board import pair_count
from ..engine.errors import ContentSupplyFailure
from ..engine.models import GameResult, Language, Level, SessionConfig, Tile
from .llm_client import LLMClient
from .models import ContentSource, LLMConfig, WordEntry
from .prompts import (
    build_explanation_prompt,
    build_generation_prompt,
    build_summary_prompt,
    get_system_prompt,
)
from .tiles import build_tile_pairs, validate_tile_set
from .word_bank import LocalWordBank

logger = logging.getLogger(__name__)


def parse_word_entries(response: str, expected_count: int) -> List[WordEntry]:
    """
    Extract word entries from an LLM reply.

    Accepts a bare JSON array or one wrapped in a markdown code block.
    Malformed items are skipped; at most `expected_count` entries are kept.

    Raises:
        ValueError: If no JSON array can be parsed from the reply
    """
    text = response.strip()

    fenced = re.search(r'```(?:json)?\s*(.*?)```', text, re.DOTALL)
    if fenced:
        text = fenced.group(1).strip()

    array = re.search(r'\[.*\]', text, re.DOTALL)
    if array:
        text = array.group(0)

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse AI response as JSON: {e}") from e

    if not isinstance(parsed, list):
        raise ValueError("AI response is not a JSON array")

    entries: List[WordEntry] = []
    for item in parsed:
        if len(entries) >= expected_count:
            break
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object word entry: {item!r}")
            continue
        try:
            entries.append(WordEntry.model_validate(item))
        except PydanticValidationError:
            logger.warning(f"Skipping invalid word entry: {item!r}")

    return entries


class ContentService(BaseModel):
    """
    Supplies tiles, explanations and summaries.

    Attributes:
        llm_client: LLM client; None means local content only
        word_bank: Fallback content source
        max_retries: Extra generation attempts after the first failure
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: Optional[LLMClient] = None
    word_bank: LocalWordBank = Field(default_factory=LocalWordBank)
    max_retries: int = Field(default=1, ge=0)

    @classmethod
    def create(
        cls,
        llm_config: Optional[LLMConfig] = None,
        use_ai: bool = True,
        seed: Optional[int] = None,
    ) -> "ContentService":
        """
        Factory method wiring an LLM client from config.

        Args:
            llm_config: LLM settings; defaults are used when omitted
            use_ai: False to serve local content only
            seed: Seed for the local word bank
        """
        llm_config = llm_config or LLMConfig()
        llm_client = None
        if use_ai:
            llm_kwargs: dict[str, Any] = dict(llm_config.__pydantic_extra__ or {})
            llm_client = LLMClient(
                model=llm_config.model,
                temperature=llm_config.temperature,
                max_tokens=llm_config.max_tokens,
                **llm_kwargs,
            )

        return cls(
            llm_client=llm_client,
            word_bank=LocalWordBank(seed=seed),
            max_retries=llm_config.max_retries,
        )

    async def generate_content(self, language: Language, level: Level, theme: str, count: int) -> List[Tile]:
        """
        Ask the LLM for `count` pairs.

        Raises:
            ContentSupplyFailure: If no client is configured or every attempt
                failed to produce a complete tile set
        """
        if self.llm_client is None:
            raise ContentSupplyFailure("AI client not configured")

        prompt = build_generation_prompt(language, level, theme, count)
        last_error = ""

        for attempt in range(self.max_retries + 1):
            try:
                reply = await self.llm_client.ask(get_system_prompt(language), prompt)
                entries = parse_word_entries(reply, count)
                tiles = build_tile_pairs(entries, prefix=f"ai_{uuid.uuid4().hex[:8]}")
                problems = validate_tile_set(tiles, count)
                if not problems:
                    return tiles
                last_error = "; ".join(problems)
            except Exception as e:
                last_error = str(e) or type(e).__name__
            logger.warning(f"AI generation attempt {attempt + 1} failed: {last_error}")

        raise ContentSupplyFailure(f"AI generation failed: {last_error}")

    async def supply_tiles(self, config: SessionConfig) -> Tuple[List[Tile], ContentSource]:
        """
        Tiles for a new board: AI content, or local content as fallback.

        Returns:
            (tiles, source) where source is "ai" or "local"

        Raises:
            ContentSupplyFailure: If both sources fail
        """
        count = pair_count(config.board_size)
        language, level, theme = config.language_mode, config.difficulty_level, config.theme

        try:
            return await self.generate_content(language, level, theme, count), "ai"
        except ContentSupplyFailure as e:
            logger.info(f"Falling back to local word bank: {e}")

        tiles = self.word_bank.get_words(language, level, theme, count)
        problems = validate_tile_set(tiles, count)
        if problems:
            raise ContentSupplyFailure(
                f"Failed to generate words from both AI and local sources: {'; '.join(problems)}"
            )
        return tiles, "local"

    async def explain(self, word: str, meaning: str, was_correct: bool, language: Language = "zh") -> str:
        """Short explanation of a word after a match attempt."""
        fallback = self.local_explanation(word, meaning, was_correct, language)
        if self.llm_client is None:
            return fallback

        try:
            prompt = build_explanation_prompt(word, meaning, was_correct, language)
            reply = await self.llm_client.ask(get_system_prompt(language), prompt)
        except Exception as e:
            logger.warning(f"Explanation request failed: {e}")
            return fallback
        return reply.strip() or fallback

    async def summarize(self, result: GameResult, language: Language = "zh") -> str:
        """Learning summary for a finished session."""
        if self.llm_client is None:
            return self.local_summary(result, language)

        try:
            reply = await self.llm_client.ask(get_system_prompt(language), build_summary_prompt(result, language))
        except Exception as e:
            logger.warning(f"Summary request failed: {e}")
            return self.local_summary(result, language)
        return reply.strip() or self.local_summary(result, language)

    @staticmethod
    def local_explanation(word: str, meaning: str, was_correct: bool, language: Language = "zh") -> str:
        if language == "zh":
            return f"正确！\"{word}\"的意思是：{meaning}" if was_correct else f"\"{word}\"的正确释义是：{meaning}"
        return f'Correct! "{word}" means: {meaning}' if was_correct else f'The correct meaning of "{word}" is: {meaning}'

    @staticmethod
    def local_summary(result: GameResult, language: Language = "zh") -> str:
        """Summary text built without the LLM."""
        attempts = result.correct + result.wrong
        accuracy = round(result.correct / attempts * 100) if attempts else 0
        minutes, seconds = divmod(int(result.duration_seconds), 60)

        if language == "zh":
            lines = [
                "游戏完成！",
                f"正确匹配：{result.correct}次",
                f"错误尝试：{result.wrong}次",
                f"正确率：{accuracy}%",
                f"用时：{minutes}分{seconds}秒",
                "",
            ]
            if accuracy >= 80:
                lines.append("太棒了！你的词汇掌握得很好，继续保持！")
            elif accuracy >= 60:
                lines.append("不错的表现！多加练习，你会更加熟练的。")
            else:
                lines.append("继续努力！每次练习都是进步的机会。")
        else:
            lines = [
                "Game complete!",
                f"Correct matches: {result.correct}",
                f"Wrong attempts: {result.wrong}",
                f"Accuracy: {accuracy}%",
                f"Time: {minutes}m {seconds}s",
                "",
            ]
            if accuracy >= 80:
                lines.append("Excellent! You know these words well. Keep it up!")
            elif accuracy >= 60:
                lines.append("Nice work! A little more practice and you'll master them.")
            else:
                lines.append("Keep going! Every round is a chance to improve.")

        return "\n".join(lines)
