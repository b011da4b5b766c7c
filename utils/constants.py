import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Graph model
DEFAULT_EDGE_WEIGHT = _constants["DEFAULT_EDGE_WEIGHT"]
GRAPH_TYPES = _constants["GRAPH_TYPES"]
SOFT_GRAPH_TYPES = _constants["SOFT_GRAPH_TYPES"]

# Covering algorithms
ALGORITHMS = _constants["ALGORITHMS"]
DEFAULT_ALGORITHMS = _constants["DEFAULT_ALGORITHMS"]
SOFT_DEFAULT_ALGORITHMS = _constants["SOFT_DEFAULT_ALGORITHMS"]

# Odd cycle search budget
MAX_CYCLE_LENGTH = _constants["MAX_CYCLE_LENGTH"]
MAX_CYCLE_EXPANSIONS = _constants["MAX_CYCLE_EXPANSIONS"]

# CP-SAT only takes integer coefficients
PENALTY_SCALE = _constants["PENALTY_SCALE"]
