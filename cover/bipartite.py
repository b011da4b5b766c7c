from collections import deque
from typing import List
import logging

from core.conflict_graph import ConflictGraph, VertexId
from core.shapes import Clique

logger = logging.getLogger(__name__)


def complete_bipartite_cover(graph: ConflictGraph) -> List[Clique]:
    """
    Cover each connected component with the 2-cliques of a complete bipartite graph.

    The component's ids are sorted and split at the midpoint; every pair across
    the split becomes a 2-clique and a singleton component becomes a 1-element
    clique. The split is NOT checked against the edges: callers must only pass
    components that really are complete bipartite along that order (e.g. the
    options of two overlapping classes), otherwise the cliques forbid pairs that
    never conflicted.
    """
    cover: List[Clique] = []
    for component in connected_components(graph):
        cover.extend(bipartite_cliques(component))
    return cover


def connected_components(graph: ConflictGraph) -> List[List[VertexId]]:
    """Connected components by breadth-first search, in vertex order of their first vertex."""
    components = []
    seen: set[VertexId] = set()

    for start in graph.vertices():
        if start in seen:
            continue
        seen.add(start)
        component = [start]
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbor in graph.neighbors(vertex):
                if neighbor not in seen:
                    seen.add(neighbor)
                    component.append(neighbor)
                    queue.append(neighbor)
        components.append(component)

    return components


def bipartite_cliques(component: List[VertexId]) -> List[Clique]:
    vertices = sorted(component)
    if not vertices:
        return []
    if len(vertices) == 1:
        return [[vertices[0]]]

    mid = len(vertices) // 2
    group1, group2 = vertices[:mid], vertices[mid:]
    return [[v1, v2] for v1 in group1 for v2 in group2]
