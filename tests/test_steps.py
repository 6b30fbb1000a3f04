"""
Tests for the multi-page intake steps
"""
from healthscribe.intake.steps import (
    STEPS,
    IntakeStep,
    get_step,
    next_step,
    validate_step,
)


def test_steps_cover_every_field_once():
    from healthscribe.intake.schema import IntakeRecord

    fields = [f for d in STEPS for f in d.fields]
    assert sorted(fields) == sorted(IntakeRecord.model_fields)
    assert len(fields) == len(set(fields))


def test_step_order():
    assert next_step(IntakeStep.PERSONAL_INFORMATION) == IntakeStep.HEALTH_BACKGROUND
    assert next_step(IntakeStep.HEALTH_BACKGROUND) == IntakeStep.SYMPTOM_DETAILS
    assert next_step(IntakeStep.SYMPTOM_DETAILS) is None


def test_wire_fields_use_form_names():
    assert get_step(IntakeStep.PERSONAL_INFORMATION).wire_fields == [
        "name",
        "age",
        "gender",
        "country",
        "pregnancyStatus",
    ]


def test_first_page_ignores_later_pages():
    page_one = {"age": "34", "gender": "Female", "country": "Canada"}
    assert validate_step(IntakeStep.PERSONAL_INFORMATION, page_one) == {}


def test_first_page_reports_its_own_errors():
    errors = validate_step(
        IntakeStep.PERSONAL_INFORMATION,
        {"age": 150, "gender": "", "mainSymptom": ""},
    )
    assert errors == {
        "age": "Please enter a valid age.",
        "gender": "Gender is required.",
        "country": "Country is required.",
    }


def test_health_background_is_all_optional():
    assert validate_step(IntakeStep.HEALTH_BACKGROUND, {}) == {}


def test_symptom_page(valid_form):
    assert validate_step(IntakeStep.SYMPTOM_DETAILS, valid_form) == {}

    valid_form["symptomTriggers"] = "no"
    assert validate_step(IntakeStep.SYMPTOM_DETAILS, valid_form) == {
        "symptomTriggers": "Symptom triggers are required."
    }


def test_non_mapping_reported_on_every_page():
    errors = validate_step(IntakeStep.HEALTH_BACKGROUND, ["not", "a", "form"])
    assert errors
