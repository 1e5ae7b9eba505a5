from typing import Dict

from ...engine.models import GameResult


LEVEL_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "zh": {
        "easy": "简单/常见",
        "medium": "中等难度",
        "hard": "较难/不常见",
    },
    "en": {
        "easy": "easy",
        "medium": "medium",
        "hard": "hard",
    },
}


def build_generation_prompt(language: str, level: str, theme: str, count: int) -> str:
    """
    Build the prompt asking for `count` themed word entries as a JSON array.

    Args:
        language: "zh" for Chinese idioms, "en" for English vocabulary
        level: Difficulty level
        theme: Theme the words should relate to
        count: Number of entries (pairs) requested

    Returns:
        Formatted prompt string
    """
    level_text = LEVEL_DESCRIPTIONS[language][level]

    if language == "zh":
        return f"""请生成{count}个关于"{theme}"主题的中文成语，难度为{level_text}。

要求：
1. 每个成语包含：word(成语)、meaning(释义)、hint(文化背景或典故)、confuse(易混淆的成语，可选)
2. 返回JSON数组格式
3. 确保成语与主题相关
4. hint字段要包含文化背景信息

返回格式示例：
[
  {{"word": "学而不厌", "meaning": "学习而不感到满足", "hint": "出自《论语》，孔子形容好学的态度", "confuse": "诲人不倦"}}
]

请直接返回JSON数组，不要包含其他文字。"""

    return f"""Please generate {count} English vocabulary words about "{theme}" theme, difficulty level: {level_text}.

Requirements:
1. Each word should include: word, meaning, hint (with example sentence), confuse (similar word, optional)
2. Return as JSON array
3. Ensure words are relevant to the theme
4. hint field should contain an example sentence

Return format example:
[
  {{"word": "acquire", "meaning": "to gain knowledge or skill", "hint": "Example: She acquired fluency in French.", "confuse": "obtain"}}
]

Please return only the JSON array, no other text."""


def build_explanation_prompt(word: str, meaning: str, was_correct: bool, language: str = "zh") -> str:
    """Ask for a short usage note, or a correction with a memory tip after a wrong match."""
    if language == "zh":
        if was_correct:
            return f"请简短解释\"{word}\"（{meaning}）的用法和文化背景，50字以内。"
        return (
            f"用户将\"{word}\"与错误的释义匹配了。请简短解释\"{word}\"的正确含义（{meaning}），"
            f"并给出记忆技巧，80字以内。"
        )

    if was_correct:
        return f'Briefly explain the usage of "{word}" ({meaning}) in under 50 words.'
    return (
        f'The player matched "{word}" with the wrong meaning. Briefly explain its correct '
        f"meaning ({meaning}) and give a memory tip, in under 80 words."
    )


def build_summary_prompt(result: GameResult, language: str = "zh") -> str:
    """Ask for an encouraging learning summary of a finished session."""
    duration = int(result.duration_seconds)
    minutes, seconds = divmod(duration, 60)
    learned = [record.word for record in result.match_history if record.is_correct]

    if language == "zh":
        words = "、".join(learned) or "无"
        return f"""用户完成了词语学习游戏：
- 正确匹配：{result.correct}次
- 错误尝试：{result.wrong}次
- 用时：{minutes}分{seconds}秒
- 学习的词语：{words}

请生成一段简短的学习总结和建议，100字以内，语气鼓励积极。"""

    words = ", ".join(learned) or "none"
    return f"""The player finished a word matching game:
- Correct matches: {result.correct}
- Wrong attempts: {result.wrong}
- Time: {minutes}m {seconds}s
- Words learned: {words}

Write a short, encouraging learning summary with suggestions, under 100 words."""
