"""Conflict graph data model shared by every covering algorithm."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging

from utils.constants import DEFAULT_EDGE_WEIGHT
from exceptions.custom_errors import GraphConstructionError, GraphTypeMismatchError

logger = logging.getLogger(__name__)

VertexId = str
Edge = Tuple[VertexId, VertexId, float]


@dataclass
class VertexData:
    """
    Payload attached to a conflict graph vertex.

    `class_id` is the grouping key used by the special star cover. The time and
    room ids are only set for the class-time / class-room graph types.
    """

    class_id: str
    """The class this decision belongs to."""
    time_id: Optional[str] = None
    """The time slot of a class-time or class-time-room decision."""
    room_id: Optional[str] = None
    """The room of a class-room or class-time-room decision."""
    attributes: Dict[str, Any] = field(default_factory=dict)
    """Anything else the caller wants to carry along."""

    @classmethod
    def coerce(cls, value: Union["VertexData", Mapping[str, Any]]) -> "VertexData":
        """Accept either a VertexData or a mapping with a `class_id`/`classId` key."""
        if isinstance(value, VertexData):
            return value
        if not isinstance(value, Mapping):
            raise GraphConstructionError(
                f"Vertex data must be a mapping or VertexData, got {type(value).__name__}"
            )

        values = dict(value)
        class_id = values.pop("class_id", values.pop("classId", None))
        if class_id is None:
            raise GraphConstructionError(f"Vertex data is missing a class_id: {value!r}")

        time_id = values.pop("time_id", values.pop("timeId", None))
        room_id = values.pop("room_id", values.pop("roomId", None))
        attributes = dict(values.pop("attributes", {}) or {})
        attributes.update(values)
        return cls(
            class_id=str(class_id),
            time_id=None if time_id is None else str(time_id),
            room_id=None if room_id is None else str(room_id),
            attributes=attributes,
        )


class ConflictGraph:
    """
    Undirected, vertex-labelled, edge-weighted graph of conflicting decisions.

    Vertices keep their insertion order, which is the "graph vertex order" every
    algorithm uses for tie-breaks. Covering algorithms only read the graph;
    derived graphs (subgraph, weight_subgraph) are new objects that share the
    VertexData instances of their parent.
    """

    def __init__(self, graph_type: str = "class_time", metadata: Optional[Dict[str, Any]] = None) -> None:
        self.type = graph_type
        self.metadata: Dict[str, Any] = dict(metadata or {})
        self._vertices: Dict[VertexId, VertexData] = {}
        self._adjacency: Dict[VertexId, Dict[VertexId, float]] = {}
        self._order: Dict[VertexId, int] = {}
        self._sorted_neighbors: Dict[VertexId, List[VertexId]] = {}

    # == Construction ==
    def add_vertex(self, vertex_id: VertexId, vertex_data: Union[VertexData, Mapping[str, Any]]) -> "ConflictGraph":
        """Add a vertex, or replace the payload of an existing one (its edges are kept)."""
        data = VertexData.coerce(vertex_data)
        if vertex_id not in self._vertices:
            self._order[vertex_id] = len(self._order)
            self._adjacency[vertex_id] = {}
        self._vertices[vertex_id] = data
        return self

    def add_edge(self, from_vertex: VertexId, to_vertex: VertexId, weight: float = DEFAULT_EDGE_WEIGHT) -> "ConflictGraph":
        """
        Add an undirected edge. Re-adding an existing pair overwrites its weight.

        Raises:
            GraphConstructionError: If either endpoint is unknown or the edge is a self-loop.
        """
        missing = [v for v in (from_vertex, to_vertex) if v not in self._vertices]
        if missing:
            raise GraphConstructionError(
                f"Edge ({from_vertex}, {to_vertex}) references unknown vertices: {', '.join(map(str, missing))}"
            )
        if from_vertex == to_vertex:
            raise GraphConstructionError(f"Self-loop on vertex {from_vertex} is not allowed")

        previous = self._adjacency[from_vertex].get(to_vertex)
        if previous is not None and previous != weight:
            logger.debug(
                "Edge (%s, %s) weight overwritten: %s -> %s", from_vertex, to_vertex, previous, weight
            )
        self._adjacency[from_vertex][to_vertex] = weight
        self._adjacency[to_vertex][from_vertex] = weight
        self._sorted_neighbors.pop(from_vertex, None)
        self._sorted_neighbors.pop(to_vertex, None)
        return self

    # == Queries ==
    def vertices(self) -> List[VertexId]:
        return list(self._vertices)

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        """Neighbors in graph vertex order; an unknown vertex has none."""
        ordered = self._sorted_neighbors.get(vertex_id)
        if ordered is None:
            edge_map = self._adjacency.get(vertex_id)
            if not edge_map:
                return []
            # sorted once per vertex, rebuilt after its next add_edge
            ordered = self._sorted_neighbors[vertex_id] = sorted(edge_map, key=self._order.__getitem__)
        return list(ordered)

    def edge_weight(self, from_vertex: VertexId, to_vertex: VertexId) -> Optional[float]:
        edge_map = self._adjacency.get(from_vertex)
        if edge_map is None:
            return None
        return edge_map.get(to_vertex)

    def connected(self, from_vertex: VertexId, to_vertex: VertexId) -> bool:
        return self.edge_weight(from_vertex, to_vertex) is not None

    def vertex_data(self, vertex_id: VertexId) -> Optional[VertexData]:
        return self._vertices.get(vertex_id)

    def class_of(self, vertex_id: VertexId) -> Optional[str]:
        """Grouping key of a vertex (its class id)."""
        data = self._vertices.get(vertex_id)
        return None if data is None else data.class_id

    def vertices_for_class(self, class_id: str) -> List[VertexId]:
        return [v for v, data in self._vertices.items() if data.class_id == class_id]

    def degree(self, vertex_id: VertexId) -> int:
        return len(self._adjacency.get(vertex_id, {}))

    def vertices_by_degree(self) -> List[VertexId]:
        """Vertices by descending degree; ties keep insertion order."""
        return sorted(self._vertices, key=lambda v: -len(self._adjacency[v]))

    def edges(self) -> List[Edge]:
        """Every edge once, as (v1, v2, weight) with v1 inserted before v2."""
        result = []
        for vertex in self._vertices:
            rank = self._order[vertex]
            for other in self.neighbors(vertex):
                if self._order[other] > rank:
                    result.append((vertex, other, self._adjacency[vertex][other]))
        return result

    def size(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return sum(len(edge_map) for edge_map in self._adjacency.values()) // 2

    def is_empty(self) -> bool:
        return not self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    # == Derived graphs ==
    def _empty_copy(self) -> "ConflictGraph":
        return ConflictGraph(self.type, self.metadata)

    def subgraph(self, vertex_ids: Iterable[VertexId]) -> "ConflictGraph":
        """Induced subgraph on the given vertices (unknown ids are ignored)."""
        keep = set(vertex_ids)
        sub = self._empty_copy()
        for vertex, data in self._vertices.items():
            if vertex in keep:
                sub.add_vertex(vertex, data)
        for v1, v2, weight in self.edges():
            if v1 in keep and v2 in keep:
                sub.add_edge(v1, v2, weight)
        return sub

    def edge_subgraph(self, predicate: Callable[[VertexId, VertexId, float], bool]) -> "ConflictGraph":
        """All vertices, only the edges for which `predicate(v1, v2, weight)` holds."""
        sub = self._empty_copy()
        for vertex, data in self._vertices.items():
            sub.add_vertex(vertex, data)
        for v1, v2, weight in self.edges():
            if predicate(v1, v2, weight):
                sub.add_edge(v1, v2, weight)
        return sub

    def weight_subgraph(self, weight: float) -> "ConflictGraph":
        return self.edge_subgraph(lambda _v1, _v2, w: w == weight)

    def merge(self, other: "ConflictGraph") -> "ConflictGraph":
        """
        Merge another graph of the same type into this one.

        Payloads from `other` win; an edge present in both keeps the larger weight.

        Raises:
            GraphTypeMismatchError: If the graph types differ.
        """
        if self.type != other.type:
            raise GraphTypeMismatchError(
                f"Cannot merge graphs of different types: {self.type} vs {other.type}"
            )
        for vertex in other.vertices():
            self.add_vertex(vertex, other.vertex_data(vertex))
        for v1, v2, weight in other.edges():
            existing = self.edge_weight(v1, v2)
            self.add_edge(v1, v2, weight if existing is None else max(existing, weight))
        return self

    def __str__(self) -> str:
        return f"ConflictGraph({self.type}, vertices: {self.size()}, edges: {self.edge_count()})"

    __repr__ = __str__


# == Vertex id helpers ==
def class_time_vertex_id(class_id: str, time_id: str) -> VertexId:
    return f"ct_{class_id}_{time_id}"


def class_room_vertex_id(class_id: str, room_id: str) -> VertexId:
    return f"cr_{class_id}_{room_id}"


def class_time_room_vertex_id(class_id: str, time_id: str, room_id: str) -> VertexId:
    return f"ctr_{class_id}_{time_id}_{room_id}"


def parse_vertex_id(vertex_id: VertexId) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split an id made by the helpers above into (class_id, time_id, room_id)."""
    prefix, _, rest = vertex_id.partition("_")
    if prefix == "ct":
        parts = rest.split("_", 1)
        if len(parts) == 2:
            return parts[0], parts[1], None
    elif prefix == "cr":
        parts = rest.split("_", 1)
        if len(parts) == 2:
            return parts[0], None, parts[1]
    elif prefix == "ctr":
        parts = rest.split("_", 2)
        if len(parts) == 3:
            return parts[0], parts[1], parts[2]
    return None, None, None
