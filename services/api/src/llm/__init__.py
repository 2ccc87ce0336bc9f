"""LLM module: chat model factory and text generation adapters."""

from .client import ChatModelGenerator, TextGenerator, UnavailableGenerator
from .factory import LLMFactory

__all__ = ["ChatModelGenerator", "LLMFactory", "TextGenerator", "UnavailableGenerator"]
