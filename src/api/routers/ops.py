import logging

from fastapi import APIRouter, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api import state
from api.dependencies import PARSER_TIMEZONE
from api.metrics import RECENT_TASKS

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "timezone": PARSER_TIMEZONE,
        "recent_tasks": len(state.recent_tasks),
    }


@router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus scrape endpoint.
    """
    RECENT_TASKS.set(len(state.recent_tasks))
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
