"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    1. announce: shown before any work starts
    2. progress_callback: generator yielding (fraction, message); fills the fields below
    3. result: one-line summary
    4. output: structured output dict
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
