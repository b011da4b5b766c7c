import pandas as pd
from typing import Union, IO
from pathlib import Path
from config.paths import DATA_DIR
from core.conflict_graph import ConflictGraph
from exceptions.custom_errors import FileContentError, FileReadingError
from utils.constants import DEFAULT_EDGE_WEIGHT
from utils.validate import validate_graph_frames

VERTEX_COLUMNS = ["id", "class_id", "time_id", "room_id"]
EDGE_COLUMNS = ["source", "target", "weight"]


def _read_table(path_or_buffer: Union[str, Path, bytes, IO], label: str) -> pd.DataFrame:
    """Read a CSV or Excel table, chosen by file suffix (Excel for anything that is not .csv)."""
    try:
        if isinstance(path_or_buffer, (str, Path)) and Path(path_or_buffer).suffix.lower() == ".csv":
            return pd.read_csv(path_or_buffer)
        return pd.read_excel(path_or_buffer)
    except Exception as e:
        raise FileReadingError(f"Error loading {label}: {e}")


def _find_col(df: pd.DataFrame, *keywords: str, required: bool = True, exclude=()):
    """Find the column whose name matches, or contains, any of the keywords."""
    col_map = {str(col).lower().strip(): col for col in df.columns if col not in exclude}
    # Try exact match first
    for k in keywords:
        if k in col_map:
            return col_map[k]
    # Then try substring match
    for key, original in col_map.items():
        if any(k in key for k in keywords):
            return original
    if required:
        raise FileContentError(f"No column found containing {keywords} in {list(df.columns)}")
    return None


def standardize_vertex_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Pick id/class/time/room columns by keyword and rename them to VERTEX_COLUMNS."""
    class_col = _find_col(df, "class_id", "classid", "class")
    time_col = _find_col(df, "time_id", "timeid", "time", required=False, exclude=[class_col])
    room_col = _find_col(df, "room_id", "roomid", "room", required=False, exclude=[class_col, time_col])
    id_col = _find_col(df, "id", "vertex", "name", exclude=[class_col, time_col, room_col])

    out = pd.DataFrame(
        {
            "id": df[id_col].astype(str).str.strip(),
            "class_id": df[class_col].astype(str).str.strip(),
            "time_id": df[time_col] if time_col is not None else None,
            "room_id": df[room_col] if room_col is not None else None,
        }
    )
    return out[VERTEX_COLUMNS]


def standardize_edge_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Pick source/target/weight columns by keyword and rename them to EDGE_COLUMNS."""
    if df.empty and len(df.columns) == 0:
        return pd.DataFrame(columns=EDGE_COLUMNS)

    source_col = _find_col(df, "source", "from", "v1")
    target_col = _find_col(df, "target", "to", "v2", exclude=[source_col])
    weight_col = _find_col(df, "weight", "penalty", "cost", required=False, exclude=[source_col, target_col])

    out = pd.DataFrame(
        {
            "source": df[source_col].astype(str).str.strip(),
            "target": df[target_col].astype(str).str.strip(),
            "weight": df[weight_col] if weight_col is not None else DEFAULT_EDGE_WEIGHT,
        }
    )
    out["weight"] = pd.to_numeric(out["weight"], errors="coerce").fillna(DEFAULT_EDGE_WEIGHT)
    return out[EDGE_COLUMNS]


def graph_from_frames(
    vertices_df: pd.DataFrame,
    edges_df: pd.DataFrame,
    graph_type: str = "class_time",
) -> ConflictGraph:
    """
    Build a ConflictGraph from a vertex table and an edge table.

    Returns:
        ConflictGraph: Vertices in table order, then edges in table order.

    Raises:
        GraphConstructionError: If the tables do not describe a valid graph.
        FileContentError: If a required column is missing.
    """
    vertices_df = standardize_vertex_columns(vertices_df)
    edges_df = standardize_edge_columns(edges_df)
    validate_graph_frames(vertices_df, edges_df)

    graph = ConflictGraph(graph_type)
    for row in vertices_df.itertuples(index=False):
        graph.add_vertex(
            row.id,
            {
                "class_id": row.class_id,
                "time_id": None if pd.isna(row.time_id) else str(row.time_id),
                "room_id": None if pd.isna(row.room_id) else str(row.room_id),
            },
        )
    for row in edges_df.itertuples(index=False):
        graph.add_edge(row.source, row.target, float(row.weight))
    return graph


def load_conflict_graph(
    vertices_path: Union[str, Path, bytes, IO, None] = None,
    edges_path: Union[str, Path, bytes, IO, None] = None,
    graph_type: str = "class_time",
) -> ConflictGraph:
    """
    Load a conflict graph from two tables (CSV or Excel).

    Parameters:
        vertices_path: Vertex table. Defaults to 'data/vertices.csv'.
        edges_path: Edge table. Defaults to 'data/edges.csv'.
        graph_type: Graph type tag.

    Returns:
        ConflictGraph built by graph_from_frames.
    """
    if vertices_path is None:
        vertices_path = DATA_DIR / "vertices.csv"
    if edges_path is None:
        edges_path = DATA_DIR / "edges.csv"

    vertices_df = _read_table(vertices_path, "vertices")
    edges_df = _read_table(edges_path, "edges")
    return graph_from_frames(vertices_df, edges_df, graph_type)
