from typing import Dict, List, Optional
import logging

from ortools.sat.python import cp_model

from core.conflict_graph import ConflictGraph, VertexId
from core.constraint_manager import ConstraintManager
from core.state import CoverState
from exceptions.custom_errors import UnknownAlgorithmError
from utils.constants import *  # import all constants
from .bipartite import complete_bipartite_cover
from .clique import clique_cover, uncovered_edges
from .cycles import find_odd_cycles
from .projection import cliques_to_constraints, cycles_to_constraints, stars_to_constraints
from .rules import *
from .special_star import special_star_cover
from .star import star_cover
from .stats import get_algorithm_stats

logger = logging.getLogger(__name__)


def build_variables(model: cp_model.CpModel, graph: ConflictGraph) -> Dict[VertexId, cp_model.IntVar]:
    """Builds one decision BoolVar per vertex."""
    return {v: model.NewBoolVar(f"x_{v}") for v in graph.vertices()}


def resolve_algorithms(graph: ConflictGraph, algorithms: Optional[List[str]]) -> List[str]:
    """
    Pick the algorithms to run for a graph.

    Falls back to the configured defaults (soft graphs get the special star cover).

    Raises:
        UnknownAlgorithmError: If a requested name is not a known algorithm.
    """
    if not algorithms:
        return list(SOFT_DEFAULT_ALGORITHMS if graph.type in SOFT_GRAPH_TYPES else DEFAULT_ALGORITHMS)

    names = [str(a).strip().lower() for a in algorithms]
    unknown = [a for a in names if a not in ALGORITHMS]
    if unknown:
        raise UnknownAlgorithmError(
            f"Unknown algorithm(s): {', '.join(unknown)}. Expected any of {', '.join(ALGORITHMS)}."
        )
    return list(dict.fromkeys(names))


# == Build Cover Model ==
def build_cover_model(
    graph: ConflictGraph,
    algorithms: Optional[List[str]] = None,
    model: Optional[cp_model.CpModel] = None,
    variables: Optional[Dict[VertexId, cp_model.IntVar]] = None,
    max_cycle_length: Optional[int] = MAX_CYCLE_LENGTH,
    max_cycle_expansions: Optional[int] = MAX_CYCLE_EXPANSIONS,
    allow_partial_cycles: bool = False,
    cover_residual_edges: bool = True,
    minimize_penalties: bool = True,
    penalty_scale: int = PENALTY_SCALE,
) -> CoverState:
    """
    Runs the requested covering algorithms on a graph and projects the covers
    into constraint intents. If a CP-SAT model is given, the intents are also
    added to it.

    Args:
        graph (ConflictGraph): The conflict graph to cover.
        algorithms (Optional[List[str]]): Any of ALGORITHMS; defaults depend on the graph type.
        model (Optional[cp_model.CpModel]): Model to add the constraints to.
        variables (Optional[Dict[str, cp_model.IntVar]]): Decision variable per vertex.
            Built with `build_variables` when a model is given without them.
        max_cycle_length (Optional[int]): Longest odd cycle searched.
        max_cycle_expansions (Optional[int]): Node expansion budget of the odd cycle search.
        allow_partial_cycles (bool): Keep the cycles found so far when the budget runs out.
        cover_residual_edges (bool): Add a 2-clique for every edge the clique cover misses,
            so the clique constraints alone enforce the whole graph.
        minimize_penalties (bool): Set the model objective to the sum of soft penalties.
        penalty_scale (int): Factor turning edge weights into integer coefficients.

    Returns:
        CoverState: Covers, constraint intents, stats and model handles.

    Raises:
        UnknownAlgorithmError: If an unknown algorithm is requested.
        SearchBudgetExceeded: If the odd cycle search runs out of budget.
    """
    algorithms = resolve_algorithms(graph, algorithms)
    logger.info("📋 Covering %s with %s", graph, ", ".join(algorithms))

    state = CoverState(graph=graph, algorithms=algorithms, penalty_scale=penalty_scale)

    # === Covers ===
    if "clique" in algorithms:
        state.cliques = clique_cover(graph)
        if cover_residual_edges:
            state.residual_edges = uncovered_edges(graph, state.cliques)
        logger.info("Clique cover: %d cliques, %d residual edges", len(state.cliques), len(state.residual_edges))
    if "star" in algorithms:
        state.stars = star_cover(graph)
        logger.info("Star cover: %d stars", len(state.stars))
    if "special_star" in algorithms:
        state.special_stars = special_star_cover(graph)
        logger.info("Special star cover: %d stars", len(state.special_stars))
    if "bipartite" in algorithms:
        state.bipartite_cliques = complete_bipartite_cover(graph)
        logger.info("Bipartite cover: %d cliques", len(state.bipartite_cliques))
    if "odd_cycle" in algorithms:
        state.odd_cycles = find_odd_cycles(
            graph,
            max_length=max_cycle_length,
            max_expansions=max_cycle_expansions,
            allow_partial=allow_partial_cycles,
        )
        logger.info("Odd cycles: %d", len(state.odd_cycles))

    # === Projection ===
    residual_cliques = [[v1, v2] for v1, v2, _ in state.residual_edges]
    state.constraints = (
        cliques_to_constraints(state.cliques + residual_cliques + state.bipartite_cliques, graph)
        + stars_to_constraints(state.stars + state.special_stars, graph)
        + cycles_to_constraints(state.odd_cycles, graph)
    )
    state.stats = get_algorithm_stats(graph, state.cliques, state.stars)

    if model is None:
        return state

    # === Model ===
    state.variables = variables if variables is not None else build_variables(model, graph)

    cm = ConstraintManager(model, state)
    cm.add_rule(clique_rule)
    cm.add_rule(star_rule)
    cm.add_rule(odd_cycle_rule)
    cm.add_rule(special_star_rule)
    cm.add_rule(minimize_penalty_rule, condition=minimize_penalties)

    cm.apply_all()  # Apply all rules
    logger.info("✅ Added %d constraint intents to the model", len(state.constraints))
    return state
