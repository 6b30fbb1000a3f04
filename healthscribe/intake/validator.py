# healthscribe/intake/validator.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from healthscribe.intake.schema import (
    AGE_NOT_A_NUMBER,
    REQUIRED_TEXT_FIELDS,
    IntakeRecord,
    wire_name,
)

ROOT_ERROR_KEY = "__root__"


@dataclass
class IntakeValidation:
    """
    Outcome of validating one raw form submission.

    Exactly one of `record` / `errors` is meaningful:
    `record` is set when the data is valid, otherwise `errors`
    maps the wire name of each bad field to a message.
    """

    record: Optional[IntakeRecord] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.record is not None


# Accept either spelling of a field in an error location.
_WIRE_NAMES: Dict[str, str] = {}
for _name in IntakeRecord.model_fields:
    _WIRE_NAMES[_name] = wire_name(_name)
    _WIRE_NAMES[wire_name(_name)] = wire_name(_name)


def _message_for(field_name: Optional[str], error: Dict[str, Any]) -> str:
    if error["type"] == "missing":
        if field_name == "age":
            return AGE_NOT_A_NUMBER
        if field_name in REQUIRED_TEXT_FIELDS:
            return REQUIRED_TEXT_FIELDS[field_name][1]

    # ValueError raised from our own validators: use its text verbatim
    if error["type"] == "value_error":
        ctx = error.get("ctx") or {}
        if "error" in ctx:
            return str(ctx["error"])

    return error["msg"]


def _python_name(wire: str) -> Optional[str]:
    for name in IntakeRecord.model_fields:
        if wire_name(name) == wire:
            return name
    return None


def collect_errors(exc: ValidationError) -> Dict[str, str]:
    """
    Flatten a pydantic ValidationError into {wire_field: message}.
    The first message per field wins.
    """
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        key = _WIRE_NAMES.get(str(loc[0]), str(loc[0])) if loc else ROOT_ERROR_KEY
        if key in errors:
            continue
        errors[key] = _message_for(_python_name(key), err)
    return errors


def validate_intake(raw: Any) -> IntakeValidation:
    """
    Validate raw form data into an IntakeRecord.

    Pure and total: bad input never raises, it comes back as
    a field-keyed error map.
    """
    if not isinstance(raw, Mapping):
        return IntakeValidation(
            errors={ROOT_ERROR_KEY: "Form data must be an object."}
        )

    try:
        record = IntakeRecord.model_validate(dict(raw))
    except ValidationError as exc:
        return IntakeValidation(errors=collect_errors(exc))

    return IntakeValidation(record=record)
