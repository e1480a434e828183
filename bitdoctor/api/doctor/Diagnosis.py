"""Capability interface shared by all doctor checks."""

from typing import Protocol, runtime_checkable

from .DiagnosisState import DiagnosisState
from .ExamineResult import ExamineResult


@runtime_checkable
class Diagnosis(Protocol):
    """A self-contained check that examines state and explains how to fix it."""

    name: str
    description: str
    category: str

    @property
    def state(self) -> DiagnosisState: ...

    @property
    def result(self) -> ExamineResult | None: ...

    def examine(self) -> ExamineResult:
        """Run the check once and return its structured result."""
        ...

    def format_symptoms(self) -> str:
        """Describe what is wrong, from the last examine result."""
        ...

    def format_manual_remedy(self) -> str:
        """Describe what a human should do, from the last examine result."""
        ...
