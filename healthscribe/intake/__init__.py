# healthscribe/intake/__init__.py
from .schema import IntakeRecord
from .validator import IntakeValidation, validate_intake

__all__ = ["IntakeRecord", "IntakeValidation", "validate_intake"]
