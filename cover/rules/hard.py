from core.state import CoverState
from core.shapes import CliqueConstraint, OddCycleConstraint, StarConstraint

"""
This module contains the hard rules: conflicts that no solution may violate.
"""


def clique_rule(model, state: CoverState):
    """At most one member of every clique intent is chosen."""
    for intent in state.constraints:
        match intent:
            case CliqueConstraint(members=members) if len(members) > 1:
                model.AddAtMostOne(state.variables[v] for v in members)


def star_rule(model, state: CoverState):
    """
    A chosen center excludes all of its leaves.

    sum(leaves) + |L| * center <= |L| is the aggregated form of the
    pairwise constraints center + leaf <= 1.
    """
    for intent in state.constraints:
        match intent:
            case StarConstraint(center=center, leaves=leaves):
                n = len(leaves)
                model.Add(
                    sum(state.variables[v] for v in leaves) + n * state.variables[center] <= n
                )


def odd_cycle_rule(model, state: CoverState):
    """An odd cycle of length k holds at most (k - 1) // 2 chosen vertices."""
    for intent in state.constraints:
        match intent:
            case OddCycleConstraint(members=members):
                model.Add(sum(state.variables[v] for v in members) <= (len(members) - 1) // 2)
