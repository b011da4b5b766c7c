from fastapi import APIRouter
from utils.constants import ALGORITHMS, GRAPH_TYPES

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    """Liveness probe; also lists what the cover endpoint accepts."""
    return {"status": "ok", "algorithms": ALGORITHMS, "graphTypes": GRAPH_TYPES}
