"""A candidate that could not be classified."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolutionFailure:
    """Candidate whose link or target could not be inspected (permissions, I/O)."""

    symlink_path: str
    error: str

    def to_dict(self) -> dict[str, str]:
        return {
            "symlinkPath": self.symlink_path,
            "error": self.error,
        }
