# healthscribe/intake/prompts.py
from __future__ import annotations

from typing import Dict, List

from healthscribe.analysis.schema import DISCLAIMER
from healthscribe.intake.schema import IntakeRecord

SEE_DOCTOR_SOON = "See a doctor soon if:"
SEEK_URGENT_CARE = "Seek urgent or emergency care if:"

ANALYSIS_SYSTEM_PROMPT = """\
You are an AI-powered Symptom Analyzer. You are NOT a doctor: you never
diagnose diseases and never prescribe prescription medication.

You must return a single JSON object with the following structure:

{
  "personal_summary": string,
  "immediate_relief": string,
  "symptom_analysis": {
    "possibilities": [
      {
        "cause": string,
        "likelihood": number between 0 and 100,
        "explanation": string
      },
      ...
    ]
  },
  "otc_relief_options": string,
  "self_care_tips": string,
  "medical_care_alert": {
    "see_doctor_soon": string,
    "seek_urgent_care": string
  },
  "disclaimer": string
}

Put list-like content one item per line, each line starting with "- ".
Return ONLY the JSON object, with no additional commentary.
"""

ANALYSIS_PROMPT_TEMPLATE = """\
You are an AI-powered Symptom Analyzer designed to collect personal health details, analyze symptoms carefully, provide IMMEDIATE RELIEF guidance, and suggest safe OVER-THE-COUNTER (OTC) options when appropriate.

You are NOT a doctor. You must NOT diagnose diseases, prescribe prescription medications, or replace professional medical advice.

Analyze the following user data and generate a report according to the specified format.

USER INFORMATION:
- Name: {name}
- Age: {age}
- Gender: {gender}
- Country: {country}
- Pregnancy status: {pregnancy_status}
- Existing medical conditions: {existing_medical_conditions}
- Current medications: {current_medications}
- Known allergies: {known_allergies}
- Lifestyle factors: {lifestyle_factors}

SYMPTOM DETAILS:
- Main symptom(s): {main_symptom}
- When the symptom started: {symptom_onset}
- How often it occurs: {symptom_frequency}
- Severity: {symptom_severity}
- What makes it better or worse: {symptom_triggers}
- Any additional symptoms: {additional_symptoms}
- Whether this has happened before: {previous_occurrence}
- Any recent illness, injury, travel, or emotional stress: {recent_events}
- Whether symptoms are improving, worsening, or unchanged: {symptom_progression}

OUTPUT FORMAT:

1. PERSONAL SUMMARY (personal_summary):
- Name, age, gender, country
- Symptom duration: {symptom_onset}
- Key risk factors: {risk_factors}

2. IMMEDIATE RELIEF (immediate_relief):
- 3-6 simple, safe actions to reduce discomfort immediately

3. SYMPTOM ANALYSIS (symptom_analysis):
Possible explanations, not a diagnosis. Give 3-5 possibilities, each with a 'cause', a 'likelihood' (0-100) and a brief 'explanation'. Likelihoods must be plausible but not definitive.

4. OTC RELIEF OPTIONS (otc_relief_options):
For symptom relief only (follow label instructions), options available in {country}:
- OTC option - what it may help with + who should avoid it

5. SELF-CARE & ONGOING TIPS (self_care_tips):
- Practical daily habits to support recovery
- Lifestyle or environmental adjustments

6. WHEN TO SEEK MEDICAL CARE (medical_care_alert):
List red-flag symptoms clearly under two separate fields:
- "{see_doctor_soon}" -> see_doctor_soon
- "{seek_urgent_care}" -> seek_urgent_care

7. DISCLAIMER (disclaimer, MUST ALWAYS APPEAR):
"{disclaimer}"
"""

SELF_CARE_SYSTEM_PROMPT = """\
You are an AI assistant designed to provide personalized self-care tips.
You must return a single JSON object: {"self_care_tips": string}
Put one tip per line, each line starting with "- ".
Return ONLY the JSON object, with no additional commentary.
"""


def _risk_factors(record: IntakeRecord) -> str:
    return ", ".join(
        [
            record.existing_medical_conditions,
            record.known_allergies,
            record.lifestyle_factors,
        ]
    )


def build_analysis_prompt(record: IntakeRecord) -> str:
    """
    Render the analysis prompt for one intake record.

    Every field is echoed with its label, including empty optional ones,
    so the model always sees the same layout.
    """
    values = record.model_dump()
    values["age"] = str(record.age)
    return ANALYSIS_PROMPT_TEMPLATE.format(
        risk_factors=_risk_factors(record),
        see_doctor_soon=SEE_DOCTOR_SOON,
        seek_urgent_care=SEEK_URGENT_CARE,
        disclaimer=DISCLAIMER,
        **values,
    )


def build_analysis_messages(record: IntakeRecord) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
        {"role": "user", "content": build_analysis_prompt(record)},
    ]


def build_self_care_prompt(record: IntakeRecord) -> str:
    """
    Self-care tips prompt. Unlike the analysis prompt, empty optional
    fields are left out entirely.
    """
    symptoms = record.main_symptom
    if record.additional_symptoms:
        symptoms = f"{symptoms}, {record.additional_symptoms}"

    risk_factors = ", ".join(
        v
        for v in (
            record.existing_medical_conditions,
            record.known_allergies,
            record.lifestyle_factors,
        )
        if v
    )

    lines: List[str] = [
        "Consider the following information about the user:",
    ]
    if record.name:
        lines.append(f"Name: {record.name}")
    lines.extend(
        [
            f"Age: {record.age}",
            f"Gender: {record.gender}",
            f"Country: {record.country}",
            f"Symptom Duration: {record.symptom_onset}",
        ]
    )
    if risk_factors:
        lines.append(f"Key Risk Factors: {risk_factors}")
    lines.append(f"Main Symptom: {record.main_symptom}")
    lines.append(f"Symptoms: {symptoms}")
    if record.existing_medical_conditions:
        lines.append(f"Medical Conditions: {record.existing_medical_conditions}")
    if record.current_medications:
        lines.append(f"Medications: {record.current_medications}")
    if record.known_allergies:
        lines.append(f"Allergies: {record.known_allergies}")
    if record.lifestyle_factors:
        lines.append(f"Lifestyle Factors: {record.lifestyle_factors}")

    return (
        "\n".join(lines)
        + "\n\n"
        "Generate practical and actionable self-care tips that the user can "
        "implement to support their recovery and manage their symptoms. These "
        "tips should be tailored to the user's specific situation and consider "
        "their medical history, lifestyle factors, and any allergies or "
        "medications they are taking.\n\n"
        "Focus on suggesting daily habits and lifestyle adjustments that can "
        "help alleviate symptoms and promote overall well-being."
    )


def build_self_care_messages(record: IntakeRecord) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SELF_CARE_SYSTEM_PROMPT},
        {"role": "user", "content": build_self_care_prompt(record)},
    ]
