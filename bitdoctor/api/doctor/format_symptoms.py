"""Render broken links as a symptom report."""

from ._constants import BROKEN_SYMLINKS_NAME, SYMPTOMS_HEADER
from .ExamineData import ExamineData
from .MissingExamineDataError import MissingExamineDataError


def format_symptoms(data: ExamineData | None) -> str:
    """One ``symlink path: "...", broken link: "..."`` line per broken link, after a header.

    Raises:
        MissingExamineDataError: If ``data`` is None
    """
    if data is None:
        raise MissingExamineDataError(BROKEN_SYMLINKS_NAME)
    lines = [f'symlink path: "{b.symlink_path}", broken link: "{b.broken_path}"' for b in data.broken_symlinks]
    return SYMPTOMS_HEADER + "\n" + "\n".join(lines)
