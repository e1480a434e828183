"""Doctor API module - diagnoses for a Bit workspace."""

from .BrokenSymlink import BrokenSymlink
from .BrokenSymlinkFiles import BrokenSymlinkFiles
from .collect_broken_symlinks import collect_broken_symlinks
from .Diagnosis import Diagnosis
from .DiagnosisState import DiagnosisState
from .ExamineData import ExamineData
from .ExamineResult import ExamineResult
from .format_manual_remedy import format_manual_remedy
from .format_symptoms import format_symptoms
from .get_path_to_delete import get_path_to_delete
from .LinkResolution import LinkResolution
from .LinkStatus import LinkStatus
from .MissingExamineDataError import MissingExamineDataError
from .ResolutionFailure import ResolutionFailure
from .resolve_link import resolve_link
from .scan_candidate_paths import scan_candidate_paths
from .unique_paths_to_delete import unique_paths_to_delete

__all__ = [
    "BrokenSymlink",
    "BrokenSymlinkFiles",
    "Diagnosis",
    "DiagnosisState",
    "ExamineData",
    "ExamineResult",
    "LinkResolution",
    "LinkStatus",
    "MissingExamineDataError",
    "ResolutionFailure",
    "collect_broken_symlinks",
    "format_manual_remedy",
    "format_symptoms",
    "get_path_to_delete",
    "resolve_link",
    "scan_candidate_paths",
    "unique_paths_to_delete",
]
