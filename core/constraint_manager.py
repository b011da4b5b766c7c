from typing import Callable, List, Tuple
import logging

from ortools.sat.python import cp_model

from .state import CoverState

logger = logging.getLogger(__name__)

CoverRule = Callable[[cp_model.CpModel, CoverState], None]


class ConstraintManager:
    """
    Ordered registry of cover rules.

    A rule is a plain `rule(model, state)` function that reads the constraint
    intents from `state` and adds the matching CP-SAT constraints to `model`.
    """

    def __init__(self, model: cp_model.CpModel, state: CoverState):
        self.model = model
        self.state = state
        self.rules: List[Tuple[str, CoverRule]] = []

    def add_rule(self, rule_func: CoverRule, condition: bool = True) -> None:
        """Register a rule; skipped when `condition` is false."""
        if not condition:
            logger.debug("Rule %s disabled", rule_func.__name__)
            return
        self.rules.append((rule_func.__name__, rule_func))

    def apply_all(self) -> int:
        """Apply the registered rules in registration order. Returns how many ran."""
        for name, rule in self.rules:
            before = len(self.model.Proto().constraints)
            rule(self.model, self.state)
            logger.debug("%s added %d constraints", name, len(self.model.Proto().constraints) - before)
        return len(self.rules)
