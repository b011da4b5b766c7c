from dataclasses import dataclass, field
from ortools.sat.python import cp_model
from typing import Any, Dict, List, Tuple

from .conflict_graph import ConflictGraph, VertexId
from .shapes import Clique, ConstraintIntent, OddCycle, SpecialStar, Star


@dataclass
class CoverState:
    """
    A dataclass to hold everything produced by one covering request and, when
    a CP-SAT model is attached, the handles the constraint rules need.
    """

    # request inputs
    graph: ConflictGraph
    """The conflict graph being covered."""
    algorithms: List[str]
    """Names of the algorithms that were run, in request order."""

    # covers
    cliques: List[Clique] = field(default_factory=list)
    """Greedy clique cover."""
    stars: List[Star] = field(default_factory=list)
    """Greedy star cover."""
    special_stars: List[SpecialStar] = field(default_factory=list)
    """Special stars across every weight bucket."""
    bipartite_cliques: List[Clique] = field(default_factory=list)
    """2-cliques (and singletons) from the complete bipartite cover."""
    odd_cycles: List[OddCycle] = field(default_factory=list)
    """Odd cycles found within the search budget."""
    residual_edges: List[Tuple[VertexId, VertexId, float]] = field(default_factory=list)
    """Edges not captured inside a single clique of the clique cover."""

    # projection and diagnostics
    constraints: List[ConstraintIntent] = field(default_factory=list)
    """Constraint intents for the modelling layer."""
    stats: Dict[str, Any] = field(default_factory=dict)
    """Output of get_algorithm_stats."""

    # model handles, only set when a CP-SAT model is attached
    variables: Dict[VertexId, cp_model.IntVar] = field(default_factory=dict)
    """A dictionary mapping each vertex to its decision BoolVar."""
    penalty_terms: List[Any] = field(default_factory=list)
    """Weighted violation terms produced by soft constraints."""
    penalty_scale: int = 1
    """Factor turning float weights into CP-SAT integer coefficients."""
