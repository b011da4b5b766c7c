import pandas as pd
import pytest

from exceptions.custom_errors import FileContentError, FileReadingError, GraphConstructionError
from utils.loader import graph_from_frames, load_conflict_graph, standardize_edge_columns
from utils.validate import validate_graph_frames


def vertex_frame():
    return pd.DataFrame(
        {
            "id": ["ct_1_1", "ct_1_2", "ct_2_1", "ct_3_9"],
            "class_id": ["1", "1", "2", "3"],
            "time_id": ["1", "2", "1", None],
        }
    )


def edge_frame():
    return pd.DataFrame(
        {
            "source": ["ct_1_1", "ct_1_1"],
            "target": ["ct_1_2", "ct_2_1"],
            "weight": [1.0, 3.0],
        }
    )


def test_graph_from_frames():
    graph = graph_from_frames(vertex_frame(), edge_frame(), "class_time")
    assert graph.type == "class_time"
    assert graph.vertices() == ["ct_1_1", "ct_1_2", "ct_2_1", "ct_3_9"]
    assert graph.edges() == [("ct_1_1", "ct_1_2", 1.0), ("ct_1_1", "ct_2_1", 3.0)]
    assert graph.vertex_data("ct_1_2").time_id == "2"
    assert graph.vertex_data("ct_3_9").time_id is None
    assert graph.vertex_data("ct_1_1").room_id is None
    assert graph.class_of("ct_2_1") == "2"


def test_columns_matched_by_keyword():
    vertices = pd.DataFrame({"Vertex": ["a", "b"], "Class": ["X", "Y"]})
    edges = pd.DataFrame({"From": ["a"], "To": ["b"], "Penalty": [4]})
    graph = graph_from_frames(vertices, edges, "soft")
    assert graph.edges() == [("a", "b", 4.0)]
    assert graph.class_of("b") == "Y"


def test_missing_weight_defaults():
    edges = standardize_edge_columns(pd.DataFrame({"source": ["a"], "target": ["b"]}))
    assert edges["weight"].tolist() == [1.0]


def test_missing_class_column():
    with pytest.raises(FileContentError):
        graph_from_frames(pd.DataFrame({"id": ["a"]}), edge_frame())


def test_edge_to_unknown_vertex():
    edges = pd.DataFrame({"source": ["ct_1_1"], "target": ["ct_9_9"], "weight": [1.0]})
    with pytest.raises(GraphConstructionError, match="ct_9_9"):
        graph_from_frames(vertex_frame(), edges)


def test_self_loop_row():
    edges = pd.DataFrame({"source": ["ct_1_1"], "target": ["ct_1_1"], "weight": [1.0]})
    with pytest.raises(GraphConstructionError):
        graph_from_frames(vertex_frame(), edges)


def test_duplicate_vertex_ids():
    vertices = pd.DataFrame({"id": ["a", "a"], "class_id": ["1", "2"]})
    with pytest.raises(GraphConstructionError):
        validate_graph_frames(vertices, pd.DataFrame(columns=["source", "target", "weight"]))


def test_isolated_vertices_produce_note():
    msg = validate_graph_frames(vertex_frame(), edge_frame())
    assert "ct_3_9" in msg
    assert validate_graph_frames(vertex_frame().iloc[:3], edge_frame()) is None


def test_load_from_csv(tmp_path):
    vertices_path = tmp_path / "vertices.csv"
    edges_path = tmp_path / "edges.csv"
    vertex_frame().to_csv(vertices_path, index=False)
    edge_frame().to_csv(edges_path, index=False)

    graph = load_conflict_graph(vertices_path, edges_path, "class_time")
    assert graph.size() == 4
    assert graph.edge_weight("ct_2_1", "ct_1_1") == 3.0


def test_load_missing_file(tmp_path):
    with pytest.raises(FileReadingError):
        load_conflict_graph(tmp_path / "nope.csv", tmp_path / "nope_edges.csv")
