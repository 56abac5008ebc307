from typing import Optional, Tuple
from healthbot.schemas import PatientIntake, RISK_LEVELS

SUPPORTED_LANGUAGES = ("English", "Hindi", "Marathi")

DEFAULT_LANGUAGE = "English"
HISTORY_PLACEHOLDER = "None"
UNKNOWN_PLACEHOLDER = "?"

SYSTEM_PROMPT = """
You are HealthBot, an AI medical assistant. Generate a JSON response with this exact structure:

{
  "summary": "Brief 2-3 sentence health overview.",
  "possibleCauses": ["cause 1", "cause 2", "cause 3"],
  "riskLevel": "%s",
  "precautions": ["precaution 1", "precaution 2"],
  "safeMedications": ["generic name 1", "generic name 2"],
  "dietPlan": {
    "day1": { "breakfast": "...", "lunch": "...", "dinner": "..." },
    "day2": { "breakfast": "...", "lunch": "...", "dinner": "..." },
    ...
    "day7": { "breakfast": "...", "lunch": "...", "dinner": "..." }
  },
  "nextSteps": ["Consult GP", "Monitor symptoms", "Hydrate well"]
}

RULES:
- "riskLevel" must be exactly one of: %s (always in English).
- "dietPlan" must contain all seven days, "day1" to "day7", each with breakfast, lunch and dinner.
- "safeMedications" lists only common, safe, non-prescription medicines by generic name.
- Respond in the requested language (%s). Keep the JSON keys in English.
- Use simple, empathetic tone. NEVER prescribe strong or prescription-only drugs.
- Return ONLY valid JSON. No extra text, no markdown.
""" % (
    '" | "'.join(RISK_LEVELS),
    ", ".join(RISK_LEVELS),
    ", ".join(SUPPORTED_LANGUAGES),
)

USER_PROMPT_TEMPLATE = """
Patient: {name}, {age}, {gender}
Contact: {contact}
Symptoms: {symptoms}
History: {history}
Vitals: Temp={temperature}, Pulse={pulse}, BP={bp}, Weight={weight}
Language: {language}
"""


def _or(value: Optional[str], placeholder: str) -> str:
    if value is None or not value.strip():
        return placeholder
    return value


def build_user_message(intake: PatientIntake) -> str:
    return USER_PROMPT_TEMPLATE.format(
        name=intake.name,
        age=_or(intake.age, UNKNOWN_PLACEHOLDER),
        gender=_or(intake.gender, UNKNOWN_PLACEHOLDER),
        contact=_or(intake.contact, UNKNOWN_PLACEHOLDER),
        symptoms=intake.symptoms,
        history=_or(intake.medical_history, HISTORY_PLACEHOLDER),
        temperature=_or(intake.temperature, UNKNOWN_PLACEHOLDER),
        pulse=_or(intake.pulse, UNKNOWN_PLACEHOLDER),
        bp=_or(intake.bp, UNKNOWN_PLACEHOLDER),
        weight=_or(intake.weight, UNKNOWN_PLACEHOLDER),
        language=_or(intake.language, DEFAULT_LANGUAGE),
    )


def build_prompt(intake: PatientIntake) -> Tuple[str, str]:
    """Return (system_instruction, user_message) for one intake."""
    return SYSTEM_PROMPT, build_user_message(intake)
