# healthscribe/analysis/invoker.py
from __future__ import annotations

import json
import logging
from typing import Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from healthscribe.analysis.errors import ModelContractError, ModelServiceError
from healthscribe.analysis.schema import AnalysisReport, SelfCareTips
from healthscribe.intake.prompts import (
    build_analysis_messages,
    build_self_care_messages,
)
from healthscribe.intake.schema import IntakeRecord
from healthscribe.llm import LLMClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def clean_json_from_llm(raw: str) -> dict:
    """
    Parse the JSON object out of an LLM reply.
    Handles cases where the model wraps it in ```json ... ``` fences.
    """
    text = raw.strip()

    if text.startswith("```"):
        text = text.lstrip("`")
        if text.lower().startswith("json"):
            text = text[4:]
        text = text.rstrip("`").strip()

    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


class AnalysisInvoker:
    """
    Sends a rendered prompt to the model and validates what comes back.

    One instance can be shared between requests: it holds no per-call
    state, only the client.
    """

    def __init__(self, llm_client: LLMClient, temperature: float | None = None):
        self.llm_client = llm_client
        self.temperature = temperature

    async def analyze(self, record: IntakeRecord) -> AnalysisReport:
        return await self._invoke(build_analysis_messages(record), AnalysisReport)

    async def generate_self_care_tips(self, record: IntakeRecord) -> SelfCareTips:
        return await self._invoke(build_self_care_messages(record), SelfCareTips)

    async def _invoke(
        self,
        messages: List[Dict[str, str]],
        output_model: Type[ModelT],
    ) -> ModelT:
        try:
            raw = await self.llm_client.chat(messages, temperature=self.temperature)
        except Exception as exc:
            raise ModelServiceError(f"model call failed: {exc}") from exc

        if not raw or not raw.strip():
            raise ModelServiceError("model returned an empty reply")

        try:
            data = clean_json_from_llm(raw)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            raise ModelContractError(f"reply is not a JSON object: {exc}", raw=raw) from exc

        try:
            result = output_model.model_validate(data)
        except ValidationError as exc:
            raise ModelContractError(
                f"reply does not match {output_model.__name__}: {exc}",
                raw=raw,
            ) from exc

        logger.debug("Model reply validated as %s", output_model.__name__)
        return result
