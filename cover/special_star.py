from typing import Dict, List, Optional
import logging

from core.conflict_graph import ConflictGraph, VertexId
from core.shapes import SpecialStar
from .star import iter_stars

logger = logging.getLogger(__name__)


def special_star_cover(graph: ConflictGraph) -> List[SpecialStar]:
    """
    Star cover of a soft conflict graph, split by edge weight and leaf class.

    Every distinct weight gets its own subgraph (all vertices, only the edges of
    that weight) and its own star traversal. Each star is then split into one
    SpecialStar per leaf class. Buckets share nothing, so a vertex may appear
    in stars of several weights.
    """
    cover: List[SpecialStar] = []

    for weight in edge_weights(graph):
        subgraph = graph.weight_subgraph(weight)
        bucket = []
        for star in iter_stars(subgraph):
            for class_id, leaves in group_by_class(subgraph, star.leaves).items():
                bucket.append(
                    SpecialStar(center=star.center, leaves=tuple(leaves), class_id=class_id, weight=weight)
                )
        logger.debug("Weight %s: %d special stars", weight, len(bucket))
        cover.extend(bucket)

    return cover


def edge_weights(graph: ConflictGraph) -> List[float]:
    """Distinct edge weights in the order they are first seen."""
    return list(dict.fromkeys(weight for _, _, weight in graph.edges()))


def group_by_class(graph: ConflictGraph, vertices) -> Dict[Optional[str], List[VertexId]]:
    groups: Dict[Optional[str], List[VertexId]] = {}
    for vertex in vertices:
        groups.setdefault(graph.class_of(vertex), []).append(vertex)
    return groups
