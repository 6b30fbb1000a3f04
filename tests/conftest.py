"""
Pytest configuration and fixtures
"""
import json
from typing import Dict, List, Optional

import pytest

from healthscribe.analysis.schema import DISCLAIMER
from healthscribe.llm import LLMClient


class FakeLLMClient(LLMClient):
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []

    async def chat(self, messages, temperature=None, model=None) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def valid_form() -> Dict[str, object]:
    """The sore-throat submission, as the web form sends it."""
    return {
        "age": 34,
        "gender": "Female",
        "country": "Canada",
        "mainSymptom": "sore throat",
        "symptomOnset": "2 days ago",
        "symptomFrequency": "Constant",
        "symptomSeverity": "Mild",
        "symptomTriggers": "worse when swallowing",
        "previousOccurrence": "No",
        "symptomProgression": "Unchanged",
    }


@pytest.fixture
def model_reply() -> Dict[str, object]:
    return {
        "personal_summary": "34-year-old female in Canada with a sore throat for 2 days.",
        "immediate_relief": "- Sip warm fluids\n- Gargle with salt water\n- Rest your voice",
        "symptom_analysis": {
            "possibilities": [
                {
                    "cause": "Viral pharyngitis",
                    "likelihood": 70,
                    "explanation": "Most sore throats are caused by viruses.",
                },
                {
                    "cause": "Strep throat",
                    "likelihood": 20,
                    "explanation": "A bacterial infection, less common in adults.",
                },
                {
                    "cause": "Irritation",
                    "likelihood": 10,
                    "explanation": "Dry air or smoke can irritate the throat.",
                },
            ]
        },
        "otc_relief_options": "- Throat lozenges – soothe pain; avoid if allergic to ingredients",
        "self_care_tips": "- Use a humidifier\n- Stay hydrated",
        "medical_care_alert": {
            "see_doctor_soon": "- Symptoms last more than a week\n- Fever above 38.5°C",
            "seek_urgent_care": "- Trouble breathing\n- Unable to swallow saliva",
        },
        "disclaimer": DISCLAIMER,
    }


@pytest.fixture
def fake_llm(model_reply) -> FakeLLMClient:
    return FakeLLMClient(reply=json.dumps(model_reply))


@pytest.fixture
def make_llm():
    """Build a FakeLLMClient with a custom reply or error."""
    return FakeLLMClient
