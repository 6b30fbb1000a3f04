# healthscribe/llm/__init__.py
from .client import LLMClient, OpenAILLMClient, UnavailableLLMClient

__all__ = ["LLMClient", "OpenAILLMClient", "UnavailableLLMClient"]
