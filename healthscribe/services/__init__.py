# healthscribe/services/__init__.py
from .analysis import (
    ANALYSIS_FAILED_MESSAGE,
    INVALID_INPUT_MESSAGE,
    AnalysisFailure,
    AnalysisResult,
    AnalysisService,
    AnalysisSuccess,
    SelfCareResult,
    SelfCareSuccess,
    get_analysis_service,
)

__all__ = [
    "ANALYSIS_FAILED_MESSAGE",
    "INVALID_INPUT_MESSAGE",
    "AnalysisFailure",
    "AnalysisResult",
    "AnalysisService",
    "AnalysisSuccess",
    "SelfCareResult",
    "SelfCareSuccess",
    "get_analysis_service",
]
