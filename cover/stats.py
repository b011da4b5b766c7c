from statistics import mean
from typing import Any, Dict, List, Union

import pandas as pd

from core.conflict_graph import ConflictGraph
from core.shapes import Clique, OddCycle, SpecialStar, Star


def get_algorithm_stats(graph: ConflictGraph, clique_cover: List[Clique], star_cover: List[Star]) -> Dict[str, Any]:
    """
    Summary statistics of a graph and its clique and star covers.

    Mean sizes are 0 for an empty cover; a star's size counts its center.
    """
    return {
        "graph_vertices": graph.size(),
        "graph_edges": graph.edge_count(),
        "clique_cover_size": len(clique_cover),
        "star_cover_size": len(star_cover),
        "average_clique_size": mean(len(c) for c in clique_cover) if clique_cover else 0,
        "average_star_size": mean(s.size for s in star_cover) if star_cover else 0,
    }


def cover_summary(
    cliques: List[Clique] = (),
    stars: List[Union[Star, SpecialStar]] = (),
    odd_cycles: List[OddCycle] = (),
) -> pd.DataFrame:
    """One row per shape with its kind, size, members and (for special stars) weight and class."""
    rows = []
    for clique in cliques:
        rows.append({"kind": "clique", "size": len(clique), "members": list(clique)})
    for star in stars:
        row = {
            "kind": "special_star" if isinstance(star, SpecialStar) else "star",
            "size": star.size,
            "members": list(star.members),
        }
        if isinstance(star, SpecialStar):
            row.update(weight=star.weight, class_id=star.class_id)
        rows.append(row)
    for cycle in odd_cycles:
        rows.append({"kind": "odd_cycle", "size": len(cycle), "members": list(cycle)})

    return pd.DataFrame(rows, columns=["kind", "size", "members", "weight", "class_id"])
