import logging

from core.state import CoverState
from core.shapes import SpecialStarConstraint

"""
This module contains the soft rules: conflicts that may be violated at a cost.
"""

logger = logging.getLogger(__name__)


def special_star_rule(model, state: CoverState):
    """
    Penalise each leaf chosen together with the star's center.

    With violation count p in [0, |L|]:
        sum(leaves) + |L| * center <= |L| + p
    forces p >= number of chosen leaves when the center is chosen, and is
    slack otherwise. The penalty term is weight * p, with the weight scaled
    to an integer coefficient.
    """
    for idx, intent in enumerate(state.constraints):
        match intent:
            case SpecialStarConstraint(center=center, leaves=leaves, weight=weight):
                n = len(leaves)
                violations = model.NewIntVar(0, n, f"star_violation_{center}_{idx}")
                model.Add(
                    sum(state.variables[v] for v in leaves) + n * state.variables[center]
                    <= n + violations
                )
                coefficient = int(round(weight * state.penalty_scale))
                if coefficient == 0 and weight != 0:
                    logger.warning(
                        "⚠️ Special star at %s: weight %s rounds to 0 at penalty scale %s; its penalty is dropped.",
                        center,
                        weight,
                        state.penalty_scale,
                    )
                state.penalty_terms.append(violations * coefficient)


def minimize_penalty_rule(model, state: CoverState):
    """Minimise the sum of soft penalties, if any were produced."""
    if state.penalty_terms:
        model.Minimize(sum(state.penalty_terms))
