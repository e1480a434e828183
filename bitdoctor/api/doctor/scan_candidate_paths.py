"""Enumerate paths that may be Bit component links."""

import os
from fnmatch import fnmatchcase
from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import CANDIDATE_PATTERNS

logger = get_logger("doctor.scan")


def _matches(rel_path: str) -> bool:
    return any(fnmatchcase(rel_path, pattern) for pattern in CANDIDATE_PATTERNS)


def scan_candidate_paths(root_dir: str | Path) -> list[str]:
    """Find every path under ``root_dir`` matching ``**/node_modules/@bit/**``.

    File type is not inspected: regular files, directories and symlinks are all
    returned. Symlinked directories are listed but not descended into, and
    hidden entries are skipped the way glob skips them.

    Args:
        root_dir: Environment components directory

    Returns:
        Absolute candidate paths in sorted traversal order. Empty when
        ``root_dir`` does not exist.
    """
    root = os.path.abspath(root_dir)
    if not os.path.isdir(root):
        logger.debug("Scan root %s does not exist", root)
        return []

    candidates: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        rel_dir = os.path.relpath(dirpath, root)
        for name in sorted(dirnames + [f for f in filenames if not f.startswith(".")]):
            rel_path = name if rel_dir == os.curdir else os.path.join(rel_dir, name)
            if _matches(Path(rel_path).as_posix()):
                candidates.append(os.path.join(dirpath, name))

    logger.debug("Found %d candidate link path(s) under %s", len(candidates), root)
    return candidates
