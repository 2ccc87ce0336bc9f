"""Text generation adapters.

The generation service only depends on ``TextGenerator``: given instructions
and a user message, return the model's text. Any provider can be plugged in
behind it.
"""

from typing import Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
import structlog

from ..errors import UpstreamFailure

logger = structlog.get_logger()


class TextGenerator(Protocol):
    """Anything that turns an instruction/message pair into text."""

    async def generate(self, instructions: str, message: str) -> str: ...


def _message_text(content: str | list) -> str:
    """Flatten chat message content (plain string or list of content parts)."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class ChatModelGenerator:
    """TextGenerator backed by a langchain chat model."""

    def __init__(self, chat_model: BaseChatModel):
        self._chat_model = chat_model

    async def generate(self, instructions: str, message: str) -> str:
        """Send one system + human message exchange and return the reply text.

        Raises:
            UpstreamFailure: provider/network/rate-limit error or empty reply
        """
        messages = [SystemMessage(content=instructions), HumanMessage(content=message)]
        try:
            response = await self._chat_model.ainvoke(messages)
        except Exception as e:
            logger.error(
                "llm_request_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise UpstreamFailure(f"LLM request failed: {type(e).__name__}") from e

        text = _message_text(response.content)
        if not text.strip():
            logger.error("llm_empty_response")
            raise UpstreamFailure("LLM returned an empty response")

        logger.debug("llm_response_received", chars=len(text))
        return text


class UnavailableGenerator:
    """Stand-in used when no provider could be configured at startup.

    Every call fails as an upstream error, so the rest of the API keeps working.
    """

    def __init__(self, reason: str):
        self.reason = reason

    async def generate(self, instructions: str, message: str) -> str:
        logger.error("llm_unavailable", reason=self.reason)
        raise UpstreamFailure(f"LLM unavailable: {self.reason}")
