"""Compute the environment directory to delete for a broken link."""

import os

from ._constants import MARKER


def get_path_to_delete(symlink_path: str) -> str:
    """Return the directory above the first ``node_modules/@bit`` segment.

    The marker only matches whole path segments, so ``foo_node_modules/@bit``
    is not an occurrence. Deleting the environment directory makes Bit
    reinstall it next time. Pure string operation, the filesystem is never
    consulted.

    Raises:
        ValueError: If ``symlink_path`` does not contain the marker
    """
    index = (symlink_path + os.sep).find(os.sep + MARKER + os.sep)
    if index <= 0:
        raise ValueError(f"Path has no environment directory before {MARKER}: {symlink_path}")
    return symlink_path[:index]
