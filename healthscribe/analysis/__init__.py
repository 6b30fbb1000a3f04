# healthscribe/analysis/__init__.py
from .schema import (
    DISCLAIMER,
    AnalysisReport,
    MedicalCareAlert,
    Possibility,
    SelfCareTips,
    SymptomAnalysis,
)
from .errors import AnalysisError, ModelContractError, ModelServiceError

__all__ = [
    "DISCLAIMER",
    "AnalysisReport",
    "MedicalCareAlert",
    "Possibility",
    "SelfCareTips",
    "SymptomAnalysis",
    "AnalysisError",
    "ModelContractError",
    "ModelServiceError",
]
