# healthscribe/api/schemas.py
from __future__ import annotations

from typing import Dict, List, Optional

from healthscribe.analysis.report import ChartRow
from healthscribe.intake.schema import CamelModel


class StepSchema(CamelModel):
    step: str
    title: str
    fields: List[str]


class StepListResponse(CamelModel):
    steps: List[StepSchema]


class StepValidationResponse(CamelModel):
    step: str
    valid: bool
    errors: Dict[str, str]
    next_step: Optional[str]


class RenderedReportResponse(CamelModel):
    markdown: str
    chart: List[ChartRow]
