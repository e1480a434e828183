"""Registry of available diagnoses."""

from collections.abc import Callable
from pathlib import Path

from .BrokenSymlinkFiles import BrokenSymlinkFiles
from .Diagnosis import Diagnosis


def get_diagnoses(get_root_dir: Callable[[], str | Path], max_workers: int | None = None) -> list[Diagnosis]:
    """Build a fresh instance of every registered diagnosis."""
    return [
        BrokenSymlinkFiles(get_root_dir, max_workers=max_workers),
    ]
