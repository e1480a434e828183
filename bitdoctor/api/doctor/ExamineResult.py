"""Structured result of a diagnosis run."""

from dataclasses import dataclass
from typing import Any

from .ExamineData import ExamineData


@dataclass(frozen=True)
class ExamineResult:
    """Result of ``examine()``.

    ``valid`` reflects broken links only; resolution errors are reported
    through ``data.resolution_errors``.
    """

    valid: bool
    data: ExamineData

    @classmethod
    def from_data(cls, data: ExamineData) -> "ExamineResult":
        return cls(valid=len(data.broken_symlinks) == 0, data=data)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "data": self.data.to_dict()}
