"""Workspace lookup error."""

from pathlib import Path


class WorkspaceNotFoundError(Exception):
    """Raised when no Bit workspace contains the starting directory."""

    def __init__(self, start: Path):
        self.start = start
        super().__init__(f"No Bit workspace (.bitmap or bit.json) found at or above {start}")
