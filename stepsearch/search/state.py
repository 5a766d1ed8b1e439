"""
Search state dataclasses: candidates and per-step results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from stepsearch.graph.base import Node

Path = tuple[Node, ...]


@dataclass(frozen=True)
class Candidate:
    """
    An in-progress path plus its accumulated cost.

    The path never repeats a node; `members` mirrors it as a set so
    membership checks stay O(1).

    Attributes:
        path: Nodes visited so far, start first
        cost: Total edge cost along the path (tours include the closing edge
            once complete)
    """

    path: Path
    cost: float = 0.0
    members: frozenset = field(default=frozenset(), repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Candidate path must contain at least the start node")
        if not self.members:
            object.__setattr__(self, "members", frozenset(self.path))

    @classmethod
    def start(cls, node: Node) -> Candidate:
        return cls(path=(node,), cost=0.0)

    @property
    def last(self) -> Node:
        """Node the path currently ends on."""
        return self.path[-1]

    def extend(self, node: Node, step_cost: float) -> Candidate:
        """
        New candidate one node longer.

        Raises:
            ValueError: If `node` is already on the path
        """
        if node in self.members:
            raise ValueError(f"Node {node!r} is already on the path")
        return Candidate(
            path=self.path + (node,),
            cost=self.cost + step_cost,
            members=self.members | {node},
        )

    def __contains__(self, node: object) -> bool:
        return node in self.members

    def __len__(self) -> int:
        return len(self.path)


class FailureReason(str, Enum):
    """Why a run ended without a result."""

    NO_PATH_FOUND = "no_path_found"
    INVALID_GRAPH = "invalid_graph"


@dataclass(frozen=True)
class StepResult:
    """
    What a strategy reports after one step.

    Attributes:
        step: 1-indexed number of the step that produced this result
        frontier: Node sequences still under consideration, in the
            strategy's own order
        visited: Nodes expanded so far, in expansion order
    """

    step: int
    frontier: tuple[Path, ...]
    visited: tuple[Node, ...]

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Running(StepResult):
    """The run has more work to do."""


@dataclass(frozen=True)
class Success(StepResult):
    """
    The run finished with a path.

    Attributes:
        path: Full path, start first
        cost: Path cost (tours include the edge back to the start)
    """

    path: Path = ()
    cost: float = 0.0

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(StepResult):
    """
    The run finished without a path.

    Attributes:
        reason: Failure category
        message: Human-readable detail
    """

    reason: FailureReason = FailureReason.NO_PATH_FOUND
    message: str = ""

    @property
    def is_terminal(self) -> bool:
        return True
