"""Data collected by one examine run."""

from dataclasses import dataclass, field

from .BrokenSymlink import BrokenSymlink
from .ResolutionFailure import ResolutionFailure


@dataclass(frozen=True)
class ExamineData:
    broken_symlinks: list[BrokenSymlink] = field(default_factory=list)
    resolution_errors: list[ResolutionFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "brokenSymlinks": [b.to_dict() for b in self.broken_symlinks],
            "resolutionErrors": [f.to_dict() for f in self.resolution_errors],
        }
