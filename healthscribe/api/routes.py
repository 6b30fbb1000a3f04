# healthscribe/api/routes.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from healthscribe.analysis.report import likelihood_chart_data, render_report
from healthscribe.analysis.schema import AnalysisReport
from healthscribe.intake.steps import STEPS, IntakeStep, next_step, validate_step
from healthscribe.services import (
    AnalysisResult,
    AnalysisService,
    SelfCareResult,
    get_analysis_service,
)
from .schemas import (
    RenderedReportResponse,
    StepListResponse,
    StepSchema,
    StepValidationResponse,
)

router = APIRouter()


@router.get("/intake/steps", response_model=StepListResponse)
def list_steps() -> StepListResponse:
    return StepListResponse(
        steps=[
            StepSchema(step=d.step.value, title=d.title, fields=d.wire_fields)
            for d in STEPS
        ]
    )


@router.post("/intake/steps/{step}/validate", response_model=StepValidationResponse)
def validate_intake_step(step: str, payload: Any = Body(...)) -> StepValidationResponse:
    """
    Check one page of the form before the client moves on to the next.
    """
    try:
        current = IntakeStep(step)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown intake step '{step}'.",
        )

    errors = validate_step(current, payload)
    following = next_step(current)

    return StepValidationResponse(
        step=current.value,
        valid=not errors,
        errors=errors,
        next_step=following.value if following else None,
    )


@router.post("/analysis", response_model=AnalysisResult)
async def analyze_symptoms(
    payload: Any = Body(...),
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResult:
    """
    Validate the submitted form and run the symptom analysis.
    Always answers 200 with {success, data} or {success, error}.
    """
    return await service.submit(payload)


@router.post("/self-care-tips", response_model=SelfCareResult)
async def self_care_tips(
    payload: Any = Body(...),
    service: AnalysisService = Depends(get_analysis_service),
) -> SelfCareResult:
    return await service.self_care_tips(payload)


@router.post("/analysis/render", response_model=RenderedReportResponse)
def render_analysis(report: AnalysisReport) -> RenderedReportResponse:
    return RenderedReportResponse(
        markdown=render_report(report),
        chart=likelihood_chart_data(report.symptom_analysis.possibilities),
    )
