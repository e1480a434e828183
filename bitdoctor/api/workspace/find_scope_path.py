"""Locate the scope directory of the enclosing Bit workspace."""

from pathlib import Path

from .WorkspaceNotFoundError import WorkspaceNotFoundError

WORKSPACE_MARKERS = (".bitmap", "bit.json")


def find_scope_path(start: Path) -> Path:
    """Walk up from ``start`` to the first directory holding a workspace marker.

    The scope lives in ``.git/bit`` for workspaces inside a git repository and
    in ``.bit`` otherwise.

    Raises:
        WorkspaceNotFoundError: If no ancestor is a workspace
    """
    start = start.expanduser().resolve()
    for directory in (start, *start.parents):
        if any((directory / marker).exists() for marker in WORKSPACE_MARKERS):
            if (directory / ".git").is_dir():
                return directory / ".git" / "bit"
            return directory / ".bit"
    raise WorkspaceNotFoundError(start)
