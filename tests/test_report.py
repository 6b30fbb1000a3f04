"""
Tests for report rendering and chart data
"""
import pytest

from healthscribe.analysis.report import (
    format_analysis_text,
    likelihood_chart_data,
    render_report,
    split_list_items,
)
from healthscribe.analysis.schema import DISCLAIMER, AnalysisReport, Possibility


@pytest.fixture
def report(model_reply) -> AnalysisReport:
    return AnalysisReport.model_validate(model_reply)


def test_chart_data_preserves_values(model_reply):
    raw = model_reply["symptom_analysis"]["possibilities"]
    rows = likelihood_chart_data(raw)

    assert [(r.cause, r.likelihood, r.explanation) for r in rows] == [
        (p["cause"], p["likelihood"], p["explanation"]) for p in raw
    ]
    assert [r.label for r in rows] == ["70%", "20%", "10%"]


def test_chart_data_accepts_models():
    rows = likelihood_chart_data(
        [Possibility(cause="Tension headache", likelihood=42.5, explanation="Stress")]
    )
    assert rows[0].likelihood == 42.5
    assert rows[0].label == "42.5%"


@pytest.mark.parametrize("likelihood", [-1, 100.01, 250])
def test_chart_data_rejects_out_of_range(likelihood):
    with pytest.raises(ValueError):
        likelihood_chart_data(
            [{"cause": "x", "likelihood": likelihood, "explanation": "y"}]
        )


@pytest.mark.parametrize("likelihood", [0, 100])
def test_chart_data_accepts_bounds(likelihood):
    rows = likelihood_chart_data(
        [{"cause": "x", "likelihood": likelihood, "explanation": "y"}]
    )
    assert rows[0].likelihood == likelihood


def test_analysis_text_is_derived(report):
    assert report.symptom_analysis.analysis_text == (
        "1. Viral pharyngitis – Most sore throats are caused by viruses.\n"
        "2. Strep throat – A bacterial infection, less common in adults.\n"
        "3. Irritation – Dry air or smoke can irritate the throat."
    )
    assert format_analysis_text([]) == ""


def test_analysis_text_is_serialized(report):
    dumped = report.model_dump(by_alias=True)
    assert dumped["symptomAnalysis"]["analysisText"].startswith("1. Viral pharyngitis")


def test_split_list_items():
    text = (
        "Immediate relief:\n"
        "- Sip warm fluids\n"
        "\n"
        "* Gargle with salt water\n"
        "• Rest\n"
        "– Use lozenges\n"
        "2. Sleep well\n"
        "Plain line"
    )
    assert split_list_items(text, "immediate relief") == [
        "Sip warm fluids",
        "Gargle with salt water",
        "Rest",
        "Use lozenges",
        "Sleep well",
        "Plain line",
    ]


@pytest.mark.parametrize("text", [None, "", "   \n  "])
def test_split_list_items_empty(text):
    assert split_list_items(text) == []


def test_render_report(report):
    markdown = render_report(report)

    for heading in [
        "Personal Summary",
        "Immediate Relief",
        "Symptom Analysis",
        "OTC Relief Options",
        "Self-Care & Ongoing Tips",
        "When to Seek Medical Care",
        "See a doctor soon if:",
        "Seek urgent or emergency care if:",
        "Disclaimer",
    ]:
        assert heading in markdown

    assert "- Gargle with salt water" in markdown
    assert "- Trouble breathing" in markdown
    assert "- Viral pharyngitis: 70%" in markdown
    assert markdown.rstrip().endswith(DISCLAIMER)


def test_render_report_keeps_unbulleted_text(report):
    report.personal_summary = "Short summary."
    assert "Short summary." in render_report(report)
