import pandas as pd
from exceptions.custom_errors import GraphConstructionError


def validate_graph_frames(
    vertices_df: pd.DataFrame,
    edges_df: pd.DataFrame,
    vertices_name: str = "vertices",
    edges_name: str = "edges",
):
    """
    Validate that a vertex table and an edge table describe a well-formed graph.

    Duplicate vertex ids, self-loops and edge endpoints missing from the vertex
    table raise an error. Vertices that no edge touches only produce a note.

    Args:
        vertices_df (pd.DataFrame): Vertex table with an 'id' column.
        edges_df (pd.DataFrame): Edge table with 'source' and 'target' columns.
        vertices_name (str): Label for vertices_df (used in messages).
        edges_name (str): Label for edges_df (used in messages).

    Returns:
        Optional[str]: Note listing isolated vertices, if any.

    Raises:
        GraphConstructionError: If the tables do not describe a valid graph.
    """
    ids = vertices_df["id"].astype(str).str.strip()
    if ids.duplicated().any():
        raise GraphConstructionError(
            f"⚠️ Duplicate ids in {vertices_name}: {', '.join(sorted(set(ids[ids.duplicated()])))}"
        )

    missing, isolated = validate_edge_endpoints(vertices_df, edges_df)
    if missing:
        msg = [f"⚠️ Edge endpoints in {edges_name} not found in {vertices_name}:\n"]
        msg.append(f"     • {', '.join(sorted(missing))}\n")
        raise GraphConstructionError("\n".join(msg))

    if not edges_df.empty:
        loops = edges_df[edges_df["source"].astype(str).str.strip() == edges_df["target"].astype(str).str.strip()]
        if not loops.empty:
            raise GraphConstructionError(
                f"⚠️ Self-loops in {edges_name}: {', '.join(sorted(set(loops['source'].astype(str))))}"
            )

    if isolated:
        msg = [f"Note: {vertices_name!r} has {len(isolated)} entries with no conflict in {edges_name!r}.\n"]
        msg.append(f"     • {', '.join(sorted(isolated))}\n")
        msg.append("They can never appear in a cover.\n")
        return "\n".join(msg)


def validate_edge_endpoints(vertices_df: pd.DataFrame, edges_df: pd.DataFrame):
    """Returns (endpoints missing from the vertex table, vertices touched by no edge)."""
    vertex_ids = set(vertices_df["id"].astype(str).str.strip())
    if edges_df.empty:
        endpoint_ids = set()
    else:
        endpoint_ids = set(edges_df["source"].astype(str).str.strip()) | set(
            edges_df["target"].astype(str).str.strip()
        )
    missing = endpoint_ids - vertex_ids  # referenced by an edge, not declared
    isolated = vertex_ids - endpoint_ids  # declared, never referenced
    return missing, isolated
