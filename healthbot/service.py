from dataclasses import dataclass
from typing import Any, Dict, Optional
from loguru import logger
from healthbot.errors import IntakeError
from healthbot.interpreter import InterpretedReport, interpret_response
from healthbot.prompts import build_prompt
from healthbot.schemas import PatientIntake

REQUIRED_FIELDS_MESSAGE = "Name and symptoms required"


@dataclass(frozen=True)
class AnalysisResult:
    patient: Dict[str, Optional[str]]
    input: Dict[str, Optional[str]]
    outcome: InterpretedReport

    @property
    def report(self) -> Dict[str, Any]:
        return self.outcome.to_view()

    def context(self) -> Dict[str, Any]:
        """Values handed to the report template."""
        return {"patient": self.patient, "input": self.input, "report": self.report}


def analyze_intake(intake: PatientIntake, generator) -> AnalysisResult:
    """
    Validate the intake, ask the generator for a report and interpret it.

    Raises IntakeError before any external call when name or symptoms are
    missing. GenerationError from the generator is not caught here.
    """
    if intake.missing_required():
        raise IntakeError(REQUIRED_FIELDS_MESSAGE)

    system_instruction, user_message = build_prompt(intake)
    raw_text = generator.generate(system_instruction, user_message)
    outcome = interpret_response(raw_text)

    if outcome.error:
        logger.warning("Rendering error report: {}", outcome.reason)
    else:
        logger.info("Report generated (risk level: {})", outcome.report.risk_level)

    return AnalysisResult(
        patient=intake.patient_view(),
        input=intake.input_view(),
        outcome=outcome,
    )
