from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Literal, get_args

DAY_LABELS = tuple(f"day{i}" for i in range(1, 8))
RiskLevel = Literal["Low", "Moderate", "High"]
RISK_LEVELS = get_args(RiskLevel)


class PatientIntake(BaseModel):
    name: str = ""
    age: Optional[str] = None
    gender: Optional[str] = None
    contact: Optional[str] = None
    symptoms: str = ""
    medical_history: Optional[str] = None
    temperature: Optional[str] = None
    pulse: Optional[str] = None
    bp: Optional[str] = None
    weight: Optional[str] = None
    language: Optional[str] = None  # passed to the model verbatim

    def missing_required(self) -> bool:
        return not self.name.strip() or not self.symptoms.strip()

    def patient_view(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "contact": self.contact,
            "language": self.language,
        }

    def input_view(self) -> Dict[str, Optional[str]]:
        return {
            "symptoms": self.symptoms,
            "medicalHistory": self.medical_history,
            "temperature": self.temperature,
            "pulse": self.pulse,
            "bp": self.bp,
            "weight": self.weight,
        }


class DayMeals(BaseModel):
    breakfast: str
    lunch: str
    dinner: str


class HealthReport(BaseModel):
    """Shape the generation service is instructed to return."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    possible_causes: List[str] = Field(alias="possibleCauses")
    risk_level: RiskLevel = Field(alias="riskLevel")
    precautions: List[str]
    safe_medications: List[str] = Field(alias="safeMedications")
    diet_plan: Dict[str, DayMeals] = Field(alias="dietPlan")
    next_steps: List[str] = Field(alias="nextSteps")

    @field_validator("risk_level", mode="before")
    @classmethod
    def normalise_risk_level(cls, value):
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @field_validator("diet_plan")
    @classmethod
    def check_day_labels(cls, value: Dict[str, DayMeals]) -> Dict[str, DayMeals]:
        unknown = [day for day in value if day not in DAY_LABELS]
        if unknown:
            raise ValueError(f"unexpected diet plan days: {', '.join(unknown)}")
        return value
