from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Async client for LLM calls via LiteLLM.

    Holds the conversation for a single request; the content service
    clears it before each call.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = 2000
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages from the conversation."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """
        Get the current conversation.

        Returns:
            List of message dictionaries in OpenAI format
        """
        return self.messages.copy()

    async def acompletion(self, **kwargs: Any) -> Any:
        """
        Generate a completion for the current conversation.

        Args:
            **kwargs: Additional arguments to pass to litellm.acompletion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        return await litellm.acompletion(**params)

    async def ask(self, system: str, prompt: str, **kwargs: Any) -> str:
        """
        One-shot request: system prompt plus a single user message.

        Returns:
            The assistant text, or an empty string if the response had none
        """
        self.clear_messages()
        self.add_message("system", system)
        self.add_message("user", prompt)

        response = await self.acompletion(**kwargs)
        content = response.choices[0].message.content if response.choices else None
        return content or ""
