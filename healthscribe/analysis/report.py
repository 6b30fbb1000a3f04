# healthscribe/analysis/report.py
from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field, TypeAdapter

from healthscribe.analysis.schema import AnalysisReport, Possibility

# "- item", "* item", "– item", "• item" or "1. item"
_BULLET_PREFIX = re.compile(r"^(?:[-*–•]\s*|\d+\.\s*)")

_POSSIBILITIES = TypeAdapter(List[Possibility])


class ChartRow(BaseModel):
    cause: str
    likelihood: float = Field(..., ge=0, le=100)
    explanation: str
    label: str


def _format_percent(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"


def format_analysis_text(possibilities: Iterable[Possibility]) -> str:
    """
    Numbered list text for the symptom analysis, e.g.

      1. Viral pharyngitis – Common cause of a sore throat ...
      2. Strep throat – ...
    """
    return "\n".join(
        f"{i}. {p.cause} – {p.explanation}"
        for i, p in enumerate(possibilities, start=1)
    )


def split_list_items(text: Optional[str], title: Optional[str] = None) -> List[str]:
    """
    Turn a block of model text into list items.

    Blank lines and lines that just repeat the section title are dropped,
    and a leading bullet marker or number is stripped from each line.
    """
    if not text or not text.strip():
        return []

    items: List[str] = []
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        if title and line.lower().startswith(title.lower()):
            continue
        items.append(_BULLET_PREFIX.sub("", line, count=1))
    return items


def likelihood_chart_data(possibilities: Sequence[Any]) -> List[ChartRow]:
    """
    Rows for the likelihood bar chart, one per possible cause.

    Accepts Possibility objects or plain dicts; values go through unchanged.
    Raises ValueError (pydantic ValidationError) if any likelihood is
    outside [0, 100].
    """
    items = [
        p.model_dump() if isinstance(p, Possibility) else p for p in possibilities
    ]
    validated = _POSSIBILITIES.validate_python(items)
    return [
        ChartRow(
            cause=p.cause,
            likelihood=p.likelihood,
            explanation=p.explanation,
            label=_format_percent(p.likelihood),
        )
        for p in validated
    ]


def _bullets(text: str, title: Optional[str] = None) -> str:
    items = split_list_items(text, title)
    if not items:
        return text.strip()
    return "\n".join(f"- {item}" for item in items)


def render_report(report: AnalysisReport) -> str:
    """
    Markdown rendering of a full Analysis Report.
    """
    alert = report.medical_care_alert
    likelihoods = "\n".join(
        f"- {row.cause}: {row.label}"
        for row in likelihood_chart_data(report.symptom_analysis.possibilities)
    )

    sections = [
        "## 🧾 Personal Summary",
        report.personal_summary.strip(),
        "## ⚡ Immediate Relief",
        _bullets(report.immediate_relief, "immediate relief"),
        "## 🔍 Symptom Analysis",
        "Possible explanations (not a diagnosis):",
        report.symptom_analysis.analysis_text,
        "### Likelihood",
        likelihoods,
        "## 💊 OTC Relief Options",
        _bullets(report.otc_relief_options, "otc relief options"),
        "## 🏠 Self-Care & Ongoing Tips",
        _bullets(report.self_care_tips, "self-care"),
        "## 🚨 When to Seek Medical Care",
        "### See a doctor soon if:",
        _bullets(alert.see_doctor_soon, "see a doctor soon if:"),
        "### Seek urgent or emergency care if:",
        _bullets(alert.seek_urgent_care, "seek urgent or emergency care if:"),
        "## 📌 Disclaimer",
        report.disclaimer,
    ]
    return "\n\n".join(sections) + "\n"
