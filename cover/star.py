from typing import Iterator, List
import logging

from core.conflict_graph import ConflictGraph, VertexId
from core.shapes import Star

logger = logging.getLogger(__name__)


def star_cover(graph: ConflictGraph) -> List[Star]:
    """
    Greedy, vertex-disjoint star cover.

    Each unused vertex, by descending degree, becomes a center whose leaves are
    its unused neighbors. A vertex with no unused neighbor gets no star.
    Edges among leaves are not covered.
    """
    cover = list(iter_stars(graph))
    logger.debug("Star cover: %d stars", len(cover))
    return cover


def iter_stars(graph: ConflictGraph) -> Iterator[Star]:
    """Yield the stars of the greedy traversal, each pass with its own used-set."""
    used: set[VertexId] = set()

    for vertex in graph.vertices_by_degree():
        if vertex in used:
            continue
        leaves = tuple(n for n in graph.neighbors(vertex) if n not in used)
        if not leaves:
            continue
        used.add(vertex)
        used.update(leaves)
        yield Star(center=vertex, leaves=leaves)
