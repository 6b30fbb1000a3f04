# healthscribe/intake/schema.py
from __future__ import annotations

import math
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for everything that crosses the wire.

    Python code uses snake_case; the form and the JSON API use camelCase.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


AGE_NOT_A_NUMBER = "Age must be a number."
AGE_NOT_POSITIVE = "Age must be a positive number."
AGE_OUT_OF_RANGE = "Please enter a valid age."
MAX_AGE = 120

# field -> (minimum length after trimming, message)
REQUIRED_TEXT_FIELDS: Dict[str, tuple[int, str]] = {
    "gender": (1, "Gender is required."),
    "country": (1, "Country is required."),
    "main_symptom": (3, "Main symptom is required."),
    "symptom_onset": (1, "Symptom onset is required."),
    "symptom_frequency": (1, "Symptom frequency is required."),
    "symptom_severity": (1, "Symptom severity is required."),
    "symptom_triggers": (3, "Symptom triggers are required."),
    "previous_occurrence": (1, "This field is required."),
    "symptom_progression": (1, "Symptom progression is required."),
}

OPTIONAL_TEXT_FIELDS = (
    "name",
    "pregnancy_status",
    "existing_medical_conditions",
    "current_medications",
    "known_allergies",
    "lifestyle_factors",
    "additional_symptoms",
    "recent_events",
)


class IntakeRecord(CamelModel):
    """
    One submission of the intake form, normalized.

    Required text fields are trimmed and length-checked, optional ones
    collapse to "" when absent. Age accepts "34", 34 or 34.5.
    """

    # user information
    name: str = Field("", description="Full name (optional)")
    age: Union[int, float] = Field(..., description="Age in years, 0 < age <= 120")
    gender: str
    country: str = Field(..., description="Country, matters for OTC availability")
    pregnancy_status: str = ""

    # health background
    existing_medical_conditions: str = Field(
        "",
        description="e.g. asthma, diabetes, hypertension",
    )
    current_medications: str = ""
    known_allergies: str = ""
    lifestyle_factors: str = Field(
        "",
        description="Smoking, alcohol use, stress, sleep quality",
    )

    # symptom details
    main_symptom: str
    symptom_onset: str = Field(..., description="Date or duration")
    symptom_frequency: str
    symptom_severity: str = Field(..., description="mild / moderate / severe")
    symptom_triggers: str = Field(..., description="What makes it better or worse")
    additional_symptoms: str = ""
    previous_occurrence: str
    recent_events: str = Field(
        "",
        description="Recent illness, injury, travel or emotional stress",
    )
    symptom_progression: str = Field(
        ...,
        description="Improving, worsening or unchanged",
    )

    @field_validator("age", mode="before")
    @classmethod
    def _coerce_age(cls, value: Any) -> Union[int, float]:
        if isinstance(value, bool):
            raise ValueError(AGE_NOT_A_NUMBER)
        # a cleared form field (null or blank) counts as 0
        if value is None or (isinstance(value, str) and not value.strip()):
            value = 0
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                raise ValueError(AGE_NOT_A_NUMBER) from None
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(AGE_NOT_A_NUMBER)
        if value <= 0:
            raise ValueError(AGE_NOT_POSITIVE)
        if value > MAX_AGE:
            raise ValueError(AGE_OUT_OF_RANGE)
        if float(value).is_integer():
            return int(value)
        return float(value)

    @field_validator(*REQUIRED_TEXT_FIELDS, mode="before")
    @classmethod
    def _check_required_text(cls, value: Any, info) -> str:
        min_length, message = REQUIRED_TEXT_FIELDS[info.field_name]
        if not isinstance(value, str):
            raise ValueError(message)
        value = value.strip()
        if len(value) < min_length:
            raise ValueError(message)
        return value

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _normalize_optional_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("Must be text.")
        return value.strip()


def wire_name(field_name: str) -> str:
    """Alias used on the wire for an IntakeRecord field."""
    field = IntakeRecord.model_fields[field_name]
    return field.alias or field_name
