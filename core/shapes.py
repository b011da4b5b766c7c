from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .conflict_graph import VertexId

Clique = List[VertexId]
"""Vertices that are pairwise connected in the source graph."""

OddCycle = List[VertexId]
"""Closed walk of odd length; the last vertex is adjacent to the first."""


@dataclass(frozen=True)
class Star:
    center: VertexId
    leaves: Tuple[VertexId, ...]

    @property
    def members(self) -> Tuple[VertexId, ...]:
        return (self.center,) + tuple(self.leaves)

    @property
    def size(self) -> int:
        return len(self.leaves) + 1


@dataclass(frozen=True)
class SpecialStar:
    """A star restricted to one weight bucket and one leaf class."""

    center: VertexId
    leaves: Tuple[VertexId, ...]
    class_id: Optional[str]
    weight: float

    @property
    def members(self) -> Tuple[VertexId, ...]:
        return (self.center,) + tuple(self.leaves)

    @property
    def size(self) -> int:
        return len(self.leaves) + 1


class ConstraintKind(str, Enum):
    CLIQUE = "clique"
    STAR = "star"
    SPECIAL_STAR = "special_star"
    ODD_CYCLE = "odd_cycle"


@dataclass(frozen=True)
class CliqueConstraint:
    """At most one member may be chosen."""

    members: Tuple[VertexId, ...]

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.CLIQUE


@dataclass(frozen=True)
class StarConstraint:
    """If the center is chosen, no leaf may be."""

    center: VertexId
    leaves: Tuple[VertexId, ...]

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.STAR

    @property
    def members(self) -> Tuple[VertexId, ...]:
        return (self.center,) + tuple(self.leaves)


@dataclass(frozen=True)
class SpecialStarConstraint:
    """Each chosen leaf next to a chosen center costs `weight`."""

    center: VertexId
    leaves: Tuple[VertexId, ...]
    class_id: Optional[str]
    weight: float

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.SPECIAL_STAR

    @property
    def members(self) -> Tuple[VertexId, ...]:
        return (self.center,) + tuple(self.leaves)


@dataclass(frozen=True)
class OddCycleConstraint:
    """At most (len - 1) // 2 members of an odd cycle may be chosen."""

    members: Tuple[VertexId, ...]

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.ODD_CYCLE


ConstraintIntent = Union[CliqueConstraint, StarConstraint, SpecialStarConstraint, OddCycleConstraint]
