"""Immutable directed graph built from an adjacency matrix.

The graph is an arena: it owns a contiguous tuple of nodes, and edges
refer to their endpoints by slot index. A node's identity is its slot,
so two nodes carrying equal payloads are still distinct.

Building is the only mutation point. Once ``Graph.build`` returns, the
node set and the edge set never change, and the graph may be read from
several threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from ..domain.errors import InvalidDistanceError, SelfLoopError, ShapeError
from .distance import D, FloatDistance, coerce_distance, is_distance_type

T = TypeVar("T")

Matrix = Sequence[Sequence[Optional[D]]]


@dataclass(frozen=True, slots=True)
class Edge(Generic[D]):
    """Directed weighted edge between two node slots.

    Attributes:
        source: Slot index of the tail node
        target: Slot index of the head node
        distance: Weight of the edge
    """

    source: int
    target: int
    distance: D


@dataclass(frozen=True, eq=False, slots=True)
class Node(Generic[T, D]):
    """A graph vertex holding a payload and its edge lists.

    Nodes compare by identity; the graph creates exactly one Node per
    slot.

    Attributes:
        index: Slot of the node in its graph
        value: Payload carried by the node
        outgoing: Edges leaving the node, in construction order
        incoming: Edges arriving at the node, in construction order
    """

    index: int
    value: T
    outgoing: Tuple[Edge[D], ...]
    incoming: Tuple[Edge[D], ...]

    def __repr__(self) -> str:
        return f"Node(index={self.index}, value={self.value!r})"


class Graph(Generic[T, D]):
    """Fixed-size directed graph over node payloads of type ``T``.

    Use :meth:`build` or :meth:`from_weights`; the constructor is not
    meant to be called directly.
    """

    __slots__ = ("_nodes", "_edge_count", "_distance_type")

    def __init__(
        self, nodes: Tuple[Node[T, D], ...], distance_type: Type[D]
    ) -> None:
        self._nodes = nodes
        self._distance_type = distance_type
        self._edge_count = sum(len(node.outgoing) for node in nodes)

    @classmethod
    def build(
        cls,
        values: Sequence[T],
        matrix: Matrix,
        distance_type: Optional[Type[D]] = None,
    ) -> Graph[T, D]:
        """Build a graph from node values and an adjacency matrix.

        ``matrix[i][j]`` is the weight of the edge ``i -> j``, or None
        when there is no direct edge. No reverse edge is implied.

        Args:
            values: One payload per node.
            matrix: ``N x N`` matrix of optional distances, ``N = len(values)``.
            distance_type: Type of every edge weight. Inferred from the
                first present entry when omitted; FloatDistance for a
                graph without edges.

        Returns:
            The built graph.

        Raises:
            ShapeError: If the matrix is not ``N x N``.
            SelfLoopError: If a diagonal entry is present.
            InvalidDistanceError: If an entry is not a distance (raw
                numbers included) or entries mix distance types.
        """
        size = len(values)
        if len(matrix) != size or any(len(row) != size for row in matrix):
            raise ShapeError(
                f"Adjacency matrix must be {size}x{size}",
                expected=size,
                actual_rows=len(matrix),
            )
        for i in range(size):
            if matrix[i][i] is not None:
                raise SelfLoopError(
                    f"Adjacency matrix has an entry on its diagonal at {i}",
                    index=i,
                )

        if distance_type is not None and not is_distance_type(distance_type):
            raise InvalidDistanceError(
                f"{distance_type!r} is not a distance type", value=distance_type
            )

        outgoing: List[List[Edge[D]]] = [[] for _ in range(size)]
        incoming: List[List[Edge[D]]] = [[] for _ in range(size)]
        for i, row in enumerate(matrix):
            for j, distance in enumerate(row):
                if distance is None:
                    continue
                if distance_type is None:
                    if not is_distance_type(type(distance)):
                        raise InvalidDistanceError(
                            f"Edge {i} -> {j} weight {distance!r} is not a distance; "
                            "use Graph.from_weights for raw numbers",
                            value=distance,
                        )
                    distance_type = type(distance)
                elif not isinstance(distance, distance_type):
                    raise InvalidDistanceError(
                        f"Edge {i} -> {j} weight {distance!r} is not a "
                        f"{distance_type.__name__}",
                        value=distance,
                    )
                edge = Edge(i, j, distance)
                outgoing[i].append(edge)
                incoming[j].append(edge)

        nodes = tuple(
            Node(i, value, tuple(outgoing[i]), tuple(incoming[i]))
            for i, value in enumerate(values)
        )
        return cls(nodes, distance_type or FloatDistance)

    @classmethod
    def from_weights(
        cls,
        values: Sequence[T],
        matrix: Sequence[Sequence[Optional[object]]],
        distance_type: Type[D] = FloatDistance,  # type: ignore[assignment]
    ) -> Graph[T, D]:
        """Build a graph from raw numeric weights.

        Every present entry goes through the checked constructor of
        ``distance_type``.

        Raises:
            InvalidDistanceError: If a weight is NaN or not a number.
            ShapeError: If the matrix is not ``N x N``.
            SelfLoopError: If a diagonal entry is present.
        """
        converted = [
            [
                None if raw is None else coerce_distance(raw, distance_type)
                for raw in row
            ]
            for row in matrix
        ]
        return cls.build(values, converted, distance_type)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node[T, D]:
        return self.node(index)

    def __iter__(self) -> Iterator[Node[T, D]]:
        return iter(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return self._edge_count

    @property
    def distance_type(self) -> Type[D]:
        return self._distance_type

    def zero(self) -> D:
        """Return the additive identity of this graph's distances."""
        return self._distance_type.zero()

    def node(self, index: int) -> Node[T, D]:
        """Return the node stored at slot ``index``.

        Raises:
            IndexError: If ``index`` is not a slot of this graph.
        """
        if not 0 <= index < len(self._nodes):
            raise IndexError(
                f"node index {index} out of range for graph of {len(self._nodes)} nodes"
            )
        return self._nodes[index]

    def nodes(self) -> Tuple[Node[T, D], ...]:
        return self._nodes

    def value(self, index: int) -> T:
        return self.node(index).value

    def adjacent(self, index: int) -> Tuple[Edge[D], ...]:
        """Return the outgoing edges of a node, in construction order."""
        return self.node(index).outgoing

    def incoming(self, index: int) -> Tuple[Edge[D], ...]:
        """Return the incoming edges of a node, in construction order."""
        return self.node(index).incoming

    def edges(self) -> Iterator[Edge[D]]:
        for node in self._nodes:
            yield from node.outgoing

    def find_node(self, predicate: Callable[[T], bool]) -> Optional[int]:
        """Return the slot of the first node whose payload matches.

        Args:
            predicate: Called with each node payload in slot order.

        Returns:
            The matching slot index, or None.
        """
        for node in self._nodes:
            if predicate(node.value):
                return node.index
        return None

