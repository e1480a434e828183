"""Diagnosis for dangling symlinks in the environment components directory."""

from collections.abc import Callable
from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import BROKEN_SYMLINKS_CATEGORY, BROKEN_SYMLINKS_DESCRIPTION, BROKEN_SYMLINKS_NAME
from .collect_broken_symlinks import collect_broken_symlinks
from .DiagnosisState import DiagnosisState
from .ExamineData import ExamineData
from .ExamineResult import ExamineResult
from .format_manual_remedy import format_manual_remedy
from .format_symptoms import format_symptoms
from .scan_candidate_paths import scan_candidate_paths

logger = get_logger("doctor.broken_symlinks")


class BrokenSymlinkFiles:
    """Find component links whose targets were removed by a previous install.

    The root directory is obtained from ``get_root_dir`` on every run. If it
    or the scan raises (for example the workspace cannot be found) the run
    ends in the ERRORED state and the exception propagates.
    """

    name = BROKEN_SYMLINKS_NAME
    description = BROKEN_SYMLINKS_DESCRIPTION
    category = BROKEN_SYMLINKS_CATEGORY

    def __init__(self, get_root_dir: Callable[[], str | Path], max_workers: int | None = None):
        self._get_root_dir = get_root_dir
        self._max_workers = max_workers
        self._state = DiagnosisState.NOT_RUN
        self._result: ExamineResult | None = None

    @property
    def state(self) -> DiagnosisState:
        return self._state

    @property
    def result(self) -> ExamineResult | None:
        return self._result

    def examine(self) -> ExamineResult:
        self._state = DiagnosisState.RUNNING
        self._result = None
        try:
            root_dir = self._get_root_dir()
            candidates = scan_candidate_paths(root_dir)
            broken, failures = collect_broken_symlinks(candidates, max_workers=self._max_workers)
        except Exception:
            self._state = DiagnosisState.ERRORED
            raise

        result = ExamineResult.from_data(ExamineData(broken_symlinks=broken, resolution_errors=failures))

        self._result = result
        self._state = DiagnosisState.VALID if result.valid else DiagnosisState.INVALID
        logger.info(
            "%s: %d candidate(s), %d broken, %d unresolved under %s",
            self.name,
            len(candidates),
            len(broken),
            len(failures),
            root_dir,
        )
        return result

    def format_symptoms(self) -> str:
        return format_symptoms(self._result.data if self._result else None)

    def format_manual_remedy(self) -> str:
        return format_manual_remedy(self._result.data if self._result else None)
