"""Output schemas for doctor commands."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DiagnosisInfo(BaseModel):
    """Identity of a registered diagnosis."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str
    category: str


class DiagnosisReport(DiagnosisInfo):
    """Outcome of one diagnosis run.

    symptoms and manual_remedy are empty strings when the diagnosis is valid.
    """

    state: str = Field(..., description="Final state: valid, invalid or errored")
    valid: bool
    symptoms: str
    manual_remedy: str
    data: dict[str, Any] = Field(..., description="Diagnosis-specific examine data")


class DoctorExamineOutput(BaseOutputSchema):
    """Output schema for doctor examine command."""

    valid: bool = Field(..., description="True if every diagnosis that ran is valid")
    diagnoses: list[DiagnosisReport] = Field(..., description="One report per diagnosis that ran")


class DoctorListOutput(BaseOutputSchema):
    """Output schema for doctor list command."""

    diagnoses: list[DiagnosisInfo] = Field(..., description="Registered diagnoses")


register_output_schema("doctor", "examine", DoctorExamineOutput)
register_output_schema("doctor", "list", DoctorListOutput)
