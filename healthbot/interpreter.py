import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from loguru import logger
from pydantic import ValidationError
from healthbot.schemas import HealthReport

ERROR_SUMMARY = "Error parsing AI response."


@dataclass(frozen=True)
class ParsedReport:
    report: HealthReport
    error: bool = False

    def to_view(self) -> Dict[str, Any]:
        return self.report.model_dump(by_alias=True)


@dataclass(frozen=True)
class MalformedReport:
    reason: str
    error: bool = True

    def to_view(self) -> Dict[str, Any]:
        return {"summary": ERROR_SUMMARY, "error": True}


InterpretedReport = Union[ParsedReport, MalformedReport]


def interpret_response(raw_text: Optional[str]) -> InterpretedReport:
    """
    Turn the generation service's raw text into a report.
    Empty output is read as "{}". Anything that is not JSON, or is JSON of the
    wrong shape, comes back as a MalformedReport; this function never raises.
    """
    text = (raw_text or "").strip() or "{}"

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.error("JSON parse failed: {}", e)
        return MalformedReport(reason=f"invalid JSON: {e}")

    try:
        report = HealthReport.model_validate(payload)
    except ValidationError as e:
        logger.error("AI response does not match the report schema: {}", e)
        return MalformedReport(reason=f"schema mismatch: {e.error_count()} error(s)")

    return ParsedReport(report=report)
