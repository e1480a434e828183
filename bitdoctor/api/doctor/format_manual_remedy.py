"""Render the directories to delete as a remediation report."""

from ._constants import BROKEN_SYMLINKS_NAME, MANUAL_REMEDY_HEADER
from .ExamineData import ExamineData
from .MissingExamineDataError import MissingExamineDataError
from .unique_paths_to_delete import unique_paths_to_delete


def format_manual_remedy(data: ExamineData | None) -> str:
    """One line per unique path to delete, after a header.

    Raises:
        MissingExamineDataError: If ``data`` is None
    """
    if data is None:
        raise MissingExamineDataError(BROKEN_SYMLINKS_NAME)
    return MANUAL_REMEDY_HEADER + "\n" + "\n".join(unique_paths_to_delete(data.broken_symlinks))
