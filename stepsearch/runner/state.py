"""
Run record dataclasses for finished or abandoned searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from stepsearch.search.state import Failure, Path, StepResult, Success


@dataclass
class SearchRun:
    """
    Complete record of one driven run.

    Attributes:
        algorithm: Name of the strategy that ran
        result: Last result the strategy produced
        steps: Number of steps taken
        elapsed_ms: Wall-clock time spent inside step() calls (milliseconds)
        timestamp: When the run was started
    """

    algorithm: str
    result: StepResult
    steps: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def finished(self) -> bool:
        """Whether the run reached a terminal state (False if abandoned)."""
        return self.result.is_terminal

    @property
    def succeeded(self) -> bool:
        return isinstance(self.result, Success)

    @property
    def path(self) -> Path:
        """Final path, or () if the run did not succeed."""
        if isinstance(self.result, Success):
            return self.result.path
        return ()

    @property
    def cost(self) -> float | None:
        """Final path cost, or None if the run did not succeed."""
        if isinstance(self.result, Success):
            return self.result.cost
        return None

    @property
    def failure_message(self) -> str | None:
        if isinstance(self.result, Failure):
            return self.result.message
        return None
