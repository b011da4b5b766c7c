import pytest
from ortools.sat.python import cp_model

from core.shapes import CliqueConstraint, SpecialStarConstraint, StarConstraint
from cover.builder import build_cover_model, build_variables, resolve_algorithms
from exceptions.custom_errors import SearchBudgetExceeded, UnknownAlgorithmError
from conftest import make_graph


def solve_max_selection(model, state):
    """Maximise the number of chosen vertices and return (objective, chosen)."""
    model.Maximize(sum(state.variables.values()))
    solver = cp_model.CpSolver()
    status = solver.Solve(model)
    assert status == cp_model.OPTIMAL
    chosen = {v for v, var in state.variables.items() if solver.Value(var)}
    return solver.ObjectiveValue(), chosen


def test_default_algorithms_depend_on_graph_type(triangle, soft_graph):
    assert resolve_algorithms(triangle, None) == ["clique"]
    assert resolve_algorithms(soft_graph, []) == ["special_star"]
    assert resolve_algorithms(triangle, ["Star", "clique", "star"]) == ["star", "clique"]


def test_unknown_algorithm(triangle):
    with pytest.raises(UnknownAlgorithmError):
        build_cover_model(triangle, algorithms=["clique", "magic"])


def test_intents_without_model(triangle_with_pendant):
    state = build_cover_model(triangle_with_pendant, algorithms=["clique", "star"])
    assert state.cliques == [["a", "b", "c"]]
    assert state.residual_edges == [("a", "d", 1)]
    assert state.constraints == [
        CliqueConstraint(members=("a", "b", "c")),
        CliqueConstraint(members=("a", "d")),
        StarConstraint(center="a", leaves=("b", "c", "d")),
    ]
    assert state.stats["clique_cover_size"] == 1
    assert state.stats["star_cover_size"] == 1
    assert state.variables == {}


def test_residual_edges_can_be_skipped(triangle_with_pendant):
    state = build_cover_model(triangle_with_pendant, cover_residual_edges=False)
    assert state.residual_edges == []
    assert state.constraints == [CliqueConstraint(members=("a", "b", "c"))]


def test_hard_clique_constraints_forbid_every_conflict(triangle_with_pendant):
    model = cp_model.CpModel()
    state = build_cover_model(triangle_with_pendant, model=model)
    objective, chosen = solve_max_selection(model, state)
    assert objective == 2
    for u, v, _ in triangle_with_pendant.edges():
        assert not {u, v} <= chosen


def test_star_constraint_excludes_leaves_of_chosen_center(four_cycle):
    model = cp_model.CpModel()
    variables = build_variables(model, four_cycle)
    model.Add(variables["a"] == 1)
    state = build_cover_model(four_cycle, algorithms=["star"], model=model, variables=variables)
    assert state.variables is variables
    _, chosen = solve_max_selection(model, state)
    assert chosen == {"a", "c"}


def test_odd_cycle_constraint_bounds_selection(five_cycle):
    model = cp_model.CpModel()
    state = build_cover_model(five_cycle, algorithms=["odd_cycle"], model=model)
    objective, _ = solve_max_selection(model, state)
    assert objective == 2


def test_bipartite_cliques_in_model():
    graph = make_graph(["a1", "a2", "b1", "b2"], [(a, b, 1) for a in ("a1", "a2") for b in ("b1", "b2")])
    model = cp_model.CpModel()
    state = build_cover_model(graph, algorithms=["bipartite"], model=model)
    assert len(state.bipartite_cliques) == 4
    objective, chosen = solve_max_selection(model, state)
    assert objective == 2
    assert chosen in ({"a1", "a2"}, {"b1", "b2"})


def test_special_star_penalty(soft_graph):
    model = cp_model.CpModel()
    variables = build_variables(model, soft_graph)
    model.Add(variables["c1"] == 1)
    model.Add(variables["x1"] == 1)
    state = build_cover_model(soft_graph, model=model, variables=variables, penalty_scale=10)
    assert [c.kind.value for c in state.constraints] == ["special_star"] * 3
    assert isinstance(state.constraints[0], SpecialStarConstraint)

    solver = cp_model.CpSolver()
    assert solver.Solve(model) == cp_model.OPTIMAL
    # c1 with x1 costs 2; everything else left out
    assert solver.ObjectiveValue() == 20
    assert solver.Value(variables["x2"]) == 0
    assert solver.Value(variables["y1"]) == 0


def test_cycle_budget_propagates(triangle):
    with pytest.raises(SearchBudgetExceeded):
        build_cover_model(triangle, algorithms=["odd_cycle"], max_cycle_expansions=1)

    state = build_cover_model(
        triangle, algorithms=["odd_cycle"], max_cycle_expansions=2, allow_partial_cycles=True
    )
    assert state.odd_cycles == [["a", "b", "c"]]


def test_empty_graph():
    model = cp_model.CpModel()
    state = build_cover_model(make_graph([], []), algorithms=["clique", "star", "odd_cycle"], model=model)
    assert state.constraints == []
    assert state.stats["graph_vertices"] == 0
    assert state.stats["average_clique_size"] == 0


def test_tiny_weight_rounding_to_zero_is_reported(caplog):
    graph = make_graph(["c", "x"], [("c", "x", 0.004)], graph_type="soft", classes={"c": "A", "x": "B"})
    model = cp_model.CpModel()
    with caplog.at_level("WARNING"):
        build_cover_model(graph, model=model, penalty_scale=100)
    assert "rounds to 0" in caplog.text


def test_long_odd_cycle_reaches_the_model():
    ring = [f"v{i}" for i in range(9)]
    graph = make_graph(ring, [(ring[i], ring[(i + 1) % 9]) for i in range(9)])
    state = build_cover_model(graph, algorithms=["odd_cycle"])
    assert len(state.odd_cycles) == 18
    assert all(len(c.members) == 9 for c in state.constraints)
