# healthscribe/analysis/schema.py
from __future__ import annotations

from typing import List

from pydantic import Field, computed_field, field_validator

from healthscribe.intake.schema import CamelModel

DISCLAIMER = (
    "This information is for educational purposes only and does not replace "
    "professional medical advice. Always read medication labels carefully and "
    "consult a qualified healthcare professional if symptoms persist, worsen, "
    "or you are unsure."
)


class Possibility(CamelModel):
    cause: str = Field(..., min_length=1, description="Name of the possible cause")
    likelihood: float = Field(
        ...,
        ge=0,
        le=100,
        description="Likelihood percentage (0-100); plausible, never definitive",
    )
    explanation: str = Field(..., description="Brief explanation")


class SymptomAnalysis(CamelModel):
    possibilities: List[Possibility] = Field(..., min_length=1)

    @computed_field(alias="analysisText")  # type: ignore[prop-decorator]
    @property
    def analysis_text(self) -> str:
        # local import: report imports this module
        from healthscribe.analysis.report import format_analysis_text

        return format_analysis_text(self.possibilities)


class MedicalCareAlert(CamelModel):
    see_doctor_soon: str = Field(..., description="Red flags worth a doctor visit soon")
    seek_urgent_care: str = Field(
        ...,
        description="Red flags that need urgent or emergency care",
    )


class AnalysisReport(CamelModel):
    """
    The model's structured reply, validated.

    This is both the Output Schema sent to the model and what callers get
    back. The disclaimer is required from the model but always normalized
    to the fixed sentence.
    """

    personal_summary: str
    immediate_relief: str
    symptom_analysis: SymptomAnalysis
    otc_relief_options: str
    self_care_tips: str
    medical_care_alert: MedicalCareAlert
    disclaimer: str

    @field_validator("disclaimer")
    @classmethod
    def _fixed_disclaimer(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("disclaimer must be present")
        return DISCLAIMER


class SelfCareTips(CamelModel):
    self_care_tips: str = Field(..., min_length=1)
