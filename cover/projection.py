"""
Turn covers into constraint intents.

The intents only describe what has to hold; the modelling layer (see
`cover.rules`) decides how to express them.
"""

from typing import List, Optional, Union

from core.conflict_graph import ConflictGraph
from core.shapes import (
    Clique,
    CliqueConstraint,
    OddCycle,
    OddCycleConstraint,
    SpecialStar,
    SpecialStarConstraint,
    Star,
    StarConstraint,
)


def cliques_to_constraints(cliques: List[Clique], graph: Optional[ConflictGraph] = None) -> List[CliqueConstraint]:
    """One at-most-one intent per clique."""
    return [CliqueConstraint(members=tuple(clique)) for clique in cliques]


def stars_to_constraints(
    stars: List[Union[Star, SpecialStar]], graph: Optional[ConflictGraph] = None
) -> List[Union[StarConstraint, SpecialStarConstraint]]:
    """One intent per star; special stars keep their class and weight."""
    constraints = []
    for star in stars:
        match star:
            case SpecialStar(center=center, leaves=leaves, class_id=class_id, weight=weight):
                constraints.append(
                    SpecialStarConstraint(center=center, leaves=tuple(leaves), class_id=class_id, weight=weight)
                )
            case Star(center=center, leaves=leaves):
                constraints.append(StarConstraint(center=center, leaves=tuple(leaves)))
            case _:
                raise TypeError(f"Not a star: {star!r}")
    return constraints


def cycles_to_constraints(cycles: List[OddCycle], graph: Optional[ConflictGraph] = None) -> List[OddCycleConstraint]:
    return [OddCycleConstraint(members=tuple(cycle)) for cycle in cycles]
