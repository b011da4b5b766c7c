import os
import tempfile

# Keep test runs from writing the service log into the project root
os.environ.setdefault("COVER_LOG_PATH", os.path.join(tempfile.gettempdir(), "cover_test_run.log"))

import pytest

from core.conflict_graph import ConflictGraph


def make_graph(vertices, edges, graph_type="hard", classes=None):
    """Build a graph; each vertex is its own class unless `classes` says otherwise."""
    classes = classes or {}
    graph = ConflictGraph(graph_type)
    for v in vertices:
        graph.add_vertex(v, {"class_id": classes.get(v, v)})
    for edge in edges:
        graph.add_edge(*edge)
    return graph


@pytest.fixture
def triangle_with_pendant():
    """Triangle a-b-c plus d hanging off a."""
    return make_graph(
        ["a", "b", "c", "d"],
        [("a", "b", 1), ("a", "c", 1), ("b", "c", 1), ("a", "d", 1)],
    )


@pytest.fixture
def four_cycle():
    return make_graph(
        ["a", "b", "c", "d"],
        [("a", "b", 1), ("b", "c", 1), ("c", "d", 1), ("d", "a", 1)],
    )


@pytest.fixture
def triangle():
    return make_graph(["a", "b", "c"], [("a", "b", 1), ("b", "c", 1), ("a", "c", 1)])


@pytest.fixture
def five_cycle():
    return make_graph(
        ["a", "b", "c", "d", "e"],
        [("a", "b", 1), ("b", "c", 1), ("c", "d", 1), ("d", "e", 1), ("e", "a", 1)],
    )


@pytest.fixture
def complete_four():
    vertices = ["a", "b", "c", "d"]
    edges = [(u, v, 1) for i, u in enumerate(vertices) for v in vertices[i + 1:]]
    return make_graph(vertices, edges)


@pytest.fixture
def soft_graph():
    """
    c1 conflicts with x1, x2 (class B) and y1 (class C) at weight 2;
    x1 and y1 also conflict at weight 5.
    """
    return make_graph(
        ["c1", "x1", "x2", "y1"],
        [("c1", "x1", 2), ("c1", "x2", 2), ("c1", "y1", 2), ("x1", "y1", 5)],
        graph_type="soft",
        classes={"c1": "A", "x1": "B", "x2": "B", "y1": "C"},
    )
