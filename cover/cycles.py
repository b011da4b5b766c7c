from typing import List, Optional
import logging

from core.conflict_graph import ConflictGraph, VertexId
from core.shapes import OddCycle
from exceptions.custom_errors import SearchBudgetExceeded
from utils.constants import MAX_CYCLE_EXPANSIONS, MAX_CYCLE_LENGTH

logger = logging.getLogger(__name__)

_DEFAULT = object()


class SearchBudget:
    """Counts DFS node expansions (and paths cut by the length bound) across one odd cycle search."""

    def __init__(self, max_expansions: Optional[int]):
        self.max_expansions = max_expansions
        self.expansions = 0
        self.pruned = 0

    def spend(self) -> bool:
        """Take one expansion; False once the budget is used up."""
        if self.max_expansions is not None and self.expansions >= self.max_expansions:
            return False
        self.expansions += 1
        return True


def find_odd_cycles(
    graph: ConflictGraph,
    max_length=_DEFAULT,
    max_expansions=_DEFAULT,
    allow_partial: bool = False,
) -> List[OddCycle]:
    """
    Enumerate odd cycles by a depth-first search from every vertex.

    The same cycle is reported once per start vertex and direction; no
    deduplication is done. The search is exponential on dense graphs, so it is
    bounded two ways:

    Args:
        graph (ConflictGraph): The graph to search.
        max_length (Optional[int]): Longest cycle explored. Defaults to MAX_CYCLE_LENGTH (unbounded);
            None disables. Paths cut by the bound are logged as a warning.
        max_expansions (Optional[int]): Node expansions allowed for the whole call.
            Defaults to MAX_CYCLE_EXPANSIONS; None disables.
        allow_partial (bool): Return the cycles found so far instead of raising when the
            expansion budget runs out.

    Returns:
        List[OddCycle]: Cycles as vertex lists starting at their start vertex.

    Raises:
        SearchBudgetExceeded: If the expansion budget runs out and allow_partial is False.
    """
    if max_length is _DEFAULT:
        max_length = MAX_CYCLE_LENGTH
    if max_expansions is _DEFAULT:
        max_expansions = MAX_CYCLE_EXPANSIONS

    budget = SearchBudget(max_expansions)
    cycles: List[OddCycle] = []

    for start in graph.vertices():
        exhausted = _search_from(graph, start, max_length, budget, cycles)
        if exhausted:
            if not allow_partial:
                raise SearchBudgetExceeded(
                    f"Odd cycle search exceeded {max_expansions} node expansions "
                    f"({len(cycles)} cycles found before stopping).",
                    partial=cycles,
                    expansions=budget.expansions,
                )
            logger.warning(
                "⚠️ Odd cycle search stopped after %d expansions; returning %d cycles.",
                budget.expansions,
                len(cycles),
            )
            break

    if budget.pruned:
        logger.warning(
            "⚠️ Odd cycle search cut %d paths at length %s; longer odd cycles are not reported.",
            budget.pruned,
            max_length,
        )
    return cycles


def _search_from(
    graph: ConflictGraph,
    start: VertexId,
    max_length: Optional[int],
    budget: SearchBudget,
    cycles: List[OddCycle],
) -> bool:
    """Iterative DFS from `start`; appends odd cycles, returns True if the budget ran out."""
    path = [start]
    on_path = {start}
    stack = [iter(graph.neighbors(start))]

    while stack:
        neighbor = next(stack[-1], None)
        if neighbor is None:
            stack.pop()
            on_path.discard(path.pop())
            continue

        if neighbor == start:
            if len(path) >= 3 and len(path) % 2 == 1:
                cycles.append(list(path))
            continue
        if neighbor in on_path:
            continue
        if max_length is not None and len(path) >= max_length:
            budget.pruned += 1
            continue

        if not budget.spend():
            return True
        path.append(neighbor)
        on_path.add(neighbor)
        stack.append(iter(graph.neighbors(neighbor)))

    return False
