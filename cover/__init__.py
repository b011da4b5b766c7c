"""
cover
-----

Main covering module. Each strategy lives in its own module:

- `clique`, `star`, `special_star`, `bipartite`: Greedy cover algorithms.
- `cycles`: Odd cycle search with a node expansion budget.
- `projection`, `stats`: Constraint intents and diagnostics.
- `builder`: Runs a covering request end to end.

Provides high-level access to the covering functions.
"""
from .bipartite import complete_bipartite_cover, connected_components
from .clique import clique_cover, grow_clique, uncovered_edges
from .cycles import find_odd_cycles
from .projection import cliques_to_constraints, cycles_to_constraints, stars_to_constraints
from .special_star import special_star_cover
from .star import star_cover
from .stats import cover_summary, get_algorithm_stats
