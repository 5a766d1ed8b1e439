"""
Graph model base class shared by grid and proximity graphs.

Search strategies only ever talk to a graph through this interface, so the
same BFS or A* code runs on either representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator, Sequence

Node = Hashable


class GraphModel(ABC):
    """
    Abstract base class for graphs the engine can search.

    A graph is built once by the caller and treated as immutable for the
    whole of a run. Neighbour order is part of the contract: strategies
    expand neighbours in the order returned, which keeps runs deterministic.
    """

    @abstractmethod
    def nodes(self) -> Iterator[Node]:
        """Iterate over every traversable node."""
        ...

    @abstractmethod
    def neighbors(self, node: Node) -> Sequence[Node]:
        """
        Nodes reachable from `node` in one move, in a fixed order.

        Blocked or out-of-range nodes never appear here.
        """
        ...

    @abstractmethod
    def cost(self, a: Node, b: Node) -> float:
        """Cost of moving from `a` to `b`."""
        ...

    @abstractmethod
    def __contains__(self, node: object) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def is_empty(self) -> bool:
        """Whether the graph has no traversable nodes at all."""
        return len(self) == 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self)})"
