"""A symlink whose target does not exist."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrokenSymlink:
    """One dangling link and the directory whose deletion repairs it."""

    symlink_path: str
    broken_path: str
    path_to_delete: str

    def to_dict(self) -> dict[str, str]:
        return {
            "symlinkPath": self.symlink_path,
            "brokenPath": self.broken_path,
            "pathToDelete": self.path_to_delete,
        }
