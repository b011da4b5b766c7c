from schemas.cover.generate import ConflictEdge, ConflictVertex, CoverRequest
from typing import List
import pandas as pd
from fastapi import APIRouter, HTTPException
from cover.builder import build_cover_model
from cover.stats import cover_summary
from utils.loader import graph_from_frames
from utils.logger import logger
from exceptions.custom_errors import *
import traceback
from docs.cover.generate import cover_generate_description

router = APIRouter(prefix="/cover", tags=["Cover"])


def records(df: pd.DataFrame) -> list:
    """DataFrame rows as JSON-safe dicts (NaN becomes None)."""
    return df.astype(object).where(pd.notna(df), None).to_dict(orient="records")


# generate covers
@router.post(
    "/generate",
    response_model=dict,
    description=cover_generate_description,
    summary="Generate Covers",
)
async def generate_cover(
    vertices: List[ConflictVertex],
    edges: List[ConflictEdge],
    request: CoverRequest,
):
    try:
        # Convert array inputs to DataFrames
        vertices_df = pd.DataFrame(
            [v.model_dump() for v in vertices], columns=["id", "classId", "timeId", "roomId"]
        ).rename(columns={"classId": "class_id", "timeId": "time_id", "roomId": "room_id"})
        edges_df = pd.DataFrame(
            [e.model_dump() for e in edges], columns=["source", "target", "weight"]
        )

        graph = graph_from_frames(vertices_df, edges_df, request.graphType)

        logger.info("=== API inputs for build_cover_model ===")
        logger.info("graph:                 %s", graph)
        logger.info("algorithms:            %s", request.algorithms)
        logger.info("maxCycleLength:        %s", request.maxCycleLength)
        logger.info("maxCycleExpansions:    %s", request.maxCycleExpansions)
        logger.info("allowPartialCycles:    %s", request.allowPartialCycles)
        logger.info("coverResidualEdges:    %s", request.coverResidualEdges)

        state = build_cover_model(
            graph,
            algorithms=request.algorithms,
            max_cycle_length=request.maxCycleLength,
            max_cycle_expansions=request.maxCycleExpansions,
            allow_partial_cycles=request.allowPartialCycles,
            cover_residual_edges=request.coverResidualEdges,
        )

        summary_df = cover_summary(
            state.cliques + [[v1, v2] for v1, v2, _ in state.residual_edges] + state.bipartite_cliques,
            state.stars + state.special_stars,
            state.odd_cycles,
        )

        # ==== final response ====
        response = {
            "cliques": state.cliques,
            "stars": [{"center": s.center, "leaves": list(s.leaves)} for s in state.stars],
            "specialStars": [
                {"center": s.center, "leaves": list(s.leaves), "classId": s.class_id, "weight": s.weight}
                for s in state.special_stars
            ],
            "bipartiteCliques": state.bipartite_cliques,
            "oddCycles": state.odd_cycles,
            "residualEdges": [
                {"source": v1, "target": v2, "weight": w} for v1, v2, w in state.residual_edges
            ],
            "constraints": records(summary_df),
            "stats": state.stats,
        }
        return response

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
