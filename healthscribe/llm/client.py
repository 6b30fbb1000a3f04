# healthscribe/llm/client.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Dict, Optional

from openai import AsyncOpenAI

from healthscribe.config import get_settings


class LLMClient(ABC):
    """
    Simple abstraction so we can swap providers if needed.
    """

    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        model: Optional[str] = None,
    ) -> str:
        """
        messages: list of {"role": "system"|"user"|"assistant", "content": "..."}
        returns: assistant content as a string ("" if the model sent nothing)
        """
        ...


class OpenAILLMClient(LLMClient):
    """
    OpenAI (or OpenAI-compatible) implementation using the official async client.

    Retries are disabled: one chat() call is one request to the provider.
    """

    def __init__(self, model: Optional[str] = None):
        settings = get_settings()
        if not settings.openai_api_key:
            raise RuntimeError(
                "OPENAI_API_KEY is not set in environment (.env)."
            )

        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
        )
        self.default_model = model or settings.llm_model
        self.default_temperature = settings.llm_temperature

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        model: Optional[str] = None,
    ) -> str:
        completion = await self.client.chat.completions.create(
            model=model or self.default_model,
            messages=messages,
            temperature=self.default_temperature if temperature is None else temperature,
        )
        if not completion.choices:
            return ""
        content = completion.choices[0].message.content
        return content or ""


class UnavailableLLMClient(LLMClient):
    """
    Stands in when the provider client can't be built (e.g. no API key).

    Every chat() fails, so callers report a service failure per request
    instead of the process erroring on each one.
    """

    def __init__(self, reason: str):
        self.reason = reason

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        model: Optional[str] = None,
    ) -> str:
        raise RuntimeError(f"LLM client unavailable: {self.reason}")
