SYSTEM_PROMPT = "You are a helpful assistant that generates educational word content."

SYSTEM_PROMPT_ZH = "你是一位语文老师，负责为词语连连看游戏生成准确、有教育意义的成语内容。"


def get_system_prompt(language: str = "en") -> str:
    """Get the system prompt for the given language mode."""
    return SYSTEM_PROMPT_ZH if language == "zh" else SYSTEM_PROMPT
