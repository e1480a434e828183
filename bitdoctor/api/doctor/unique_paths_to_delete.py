"""Deduplicate remediation paths."""

from collections.abc import Iterable

from .BrokenSymlink import BrokenSymlink


def unique_paths_to_delete(broken_symlinks: Iterable[BrokenSymlink]) -> list[str]:
    """Unique ``path_to_delete`` values in first-seen order."""
    return list(dict.fromkeys(b.path_to_delete for b in broken_symlinks))
