from typing import Collection, List, Tuple
import logging

from core.conflict_graph import ConflictGraph, VertexId
from core.shapes import Clique

logger = logging.getLogger(__name__)


def clique_cover(graph: ConflictGraph) -> List[Clique]:
    """
    Greedy, vertex-disjoint clique cover.

    Vertices are visited by descending degree. Each unused vertex seeds a clique
    that grows one vertex at a time; a seed that finds no partner is skipped and
    stays uncovered. The cover is not minimal: edges between two cliques, or
    touching an uncovered vertex, are left to the caller (see `uncovered_edges`).
    """
    cover: List[Clique] = []
    used: set[VertexId] = set()

    for vertex in graph.vertices_by_degree():
        if vertex in used:
            continue
        clique = grow_clique(graph, vertex, used)
        if len(clique) < 2:
            continue
        cover.append(clique)
        used.update(clique)

    logger.debug("Clique cover: %d cliques over %d vertices", len(cover), len(used))
    return cover


def grow_clique(graph: ConflictGraph, seed: VertexId, used: Collection[VertexId] = ()) -> Clique:
    """
    Grow a clique from `seed` without backtracking.

    At each step the first vertex (in graph vertex order) that is not used, not
    yet a member, and adjacent to every member is appended.
    """
    clique = [seed]
    # every later member must be a neighbor of the seed
    pool = [v for v in graph.neighbors(seed) if v not in used]

    while True:
        candidate = next(
            (v for v in pool if all(graph.connected(v, m) for m in clique[1:])),
            None,
        )
        if candidate is None:
            return clique
        clique.append(candidate)
        pool.remove(candidate)


def uncovered_edges(graph: ConflictGraph, cliques: List[Clique]) -> List[Tuple[VertexId, VertexId, float]]:
    """Edges whose endpoints do not sit in the same clique of `cliques`."""
    owner = {}
    for idx, clique in enumerate(cliques):
        for vertex in clique:
            owner[vertex] = idx

    return [
        (v1, v2, weight)
        for v1, v2, weight in graph.edges()
        if v1 not in owner or owner[v1] != owner.get(v2)
    ]
