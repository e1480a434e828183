"""Formatter called without examine data."""


class MissingExamineDataError(RuntimeError):
    """Raised when a result formatter runs before ``examine()`` produced data."""

    def __init__(self, diagnosis: str):
        self.diagnosis = diagnosis
        super().__init__(f"{diagnosis}, examine data is missing")
