# healthscribe/services/analysis.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal, Union

from healthscribe.analysis.errors import ModelContractError, ModelServiceError
from healthscribe.analysis.invoker import AnalysisInvoker
from healthscribe.analysis.schema import AnalysisReport, SelfCareTips
from healthscribe.intake.schema import CamelModel
from healthscribe.intake.validator import validate_intake
from healthscribe.llm import LLMClient, OpenAILLMClient, UnavailableLLMClient

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid form data. Please check your inputs."
ANALYSIS_FAILED_MESSAGE = (
    "An unexpected error occurred during analysis. Please try again later."
)


class AnalysisSuccess(CamelModel):
    success: Literal[True] = True
    data: AnalysisReport


class AnalysisFailure(CamelModel):
    success: Literal[False] = False
    error: str


class SelfCareSuccess(CamelModel):
    success: Literal[True] = True
    data: SelfCareTips


AnalysisResult = Union[AnalysisSuccess, AnalysisFailure]
SelfCareResult = Union[SelfCareSuccess, AnalysisFailure]


class AnalysisService:
    """
    Entry point used by the API:
      - validates the raw form data
      - runs the model through the AnalysisInvoker
      - folds every outcome into a success/failure result

    Nothing raised below this point reaches the caller. Field-level
    validation detail is logged, never returned.
    """

    def __init__(self, llm_client: LLMClient):
        self.invoker = AnalysisInvoker(llm_client)

    async def submit(self, raw: Any) -> AnalysisResult:
        validation = validate_intake(raw)
        if not validation.is_valid:
            logger.warning("Intake validation failed: %s", validation.errors)
            return AnalysisFailure(error=INVALID_INPUT_MESSAGE)

        try:
            report = await self.invoker.analyze(validation.record)
        except Exception as exc:
            self._log_failure("analysis", exc)
            return AnalysisFailure(error=ANALYSIS_FAILED_MESSAGE)

        return AnalysisSuccess(data=report)

    async def self_care_tips(self, raw: Any) -> SelfCareResult:
        validation = validate_intake(raw)
        if not validation.is_valid:
            logger.warning("Intake validation failed: %s", validation.errors)
            return AnalysisFailure(error=INVALID_INPUT_MESSAGE)

        try:
            tips = await self.invoker.generate_self_care_tips(validation.record)
        except Exception as exc:
            self._log_failure("self-care tips", exc)
            return AnalysisFailure(error=ANALYSIS_FAILED_MESSAGE)

        return SelfCareSuccess(data=tips)

    def _log_failure(self, what: str, exc: Exception) -> None:
        if isinstance(exc, ModelContractError):
            logger.error(
                "Model reply for %s violated the output schema: %s; raw reply: %.500s",
                what,
                exc,
                exc.raw,
            )
        elif isinstance(exc, ModelServiceError):
            logger.error("Model service failure during %s: %s", what, exc)
        else:
            logger.exception("Unexpected error during %s", what)


@lru_cache(maxsize=1)
def get_analysis_service() -> AnalysisService:
    try:
        llm_client: LLMClient = OpenAILLMClient()
    except RuntimeError as exc:
        logger.error("Model service failure: could not configure LLM client: %s", exc)
        llm_client = UnavailableLLMClient(str(exc))
    return AnalysisService(llm_client)
