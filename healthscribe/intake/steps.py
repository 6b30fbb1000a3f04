# healthscribe/intake/steps.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from healthscribe.intake.schema import wire_name
from healthscribe.intake.validator import ROOT_ERROR_KEY, validate_intake


class IntakeStep(str, Enum):
    PERSONAL_INFORMATION = "personal_information"
    HEALTH_BACKGROUND = "health_background"
    SYMPTOM_DETAILS = "symptom_details"


@dataclass(frozen=True)
class StepDefinition:
    step: IntakeStep
    title: str
    fields: List[str]  # IntakeRecord field names, in display order

    @property
    def wire_fields(self) -> List[str]:
        return [wire_name(f) for f in self.fields]


STEPS: List[StepDefinition] = [
    StepDefinition(
        step=IntakeStep.PERSONAL_INFORMATION,
        title="Personal Information",
        fields=["name", "age", "gender", "country", "pregnancy_status"],
    ),
    StepDefinition(
        step=IntakeStep.HEALTH_BACKGROUND,
        title="Health Background",
        fields=[
            "existing_medical_conditions",
            "current_medications",
            "known_allergies",
            "lifestyle_factors",
        ],
    ),
    StepDefinition(
        step=IntakeStep.SYMPTOM_DETAILS,
        title="Symptom Details",
        fields=[
            "main_symptom",
            "symptom_onset",
            "symptom_frequency",
            "symptom_severity",
            "symptom_triggers",
            "additional_symptoms",
            "previous_occurrence",
            "recent_events",
            "symptom_progression",
        ],
    ),
]

_BY_STEP: Dict[IntakeStep, StepDefinition] = {d.step: d for d in STEPS}


def get_step(step: IntakeStep) -> StepDefinition:
    return _BY_STEP[step]


def next_step(current: IntakeStep) -> Optional[IntakeStep]:
    """
    The step after `current`, or None once the form is on its last page.
    """
    order = [d.step for d in STEPS]
    index = order.index(current)
    if index + 1 >= len(order):
        return None
    return order[index + 1]


def validate_step(step: IntakeStep, raw: Any) -> Dict[str, str]:
    """
    Validate only the fields of one form page.

    The whole record is run through the validator (later pages may still
    be empty) and errors outside this page are discarded.
    """
    result = validate_intake(raw)
    if ROOT_ERROR_KEY in result.errors:
        return dict(result.errors)

    allowed = set(get_step(step).wire_fields)
    return {k: v for k, v in result.errors.items() if k in allowed}

