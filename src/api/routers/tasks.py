import logging
import time
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api import state
from api.backend import BackendAPI
from api.dependencies import get_backend
from api.metrics import (
    REQUESTS_TOTAL,
    REQUEST_LATENCY_SECONDS,
    TASKS_CREATED_TOTAL,
    RECENT_TASKS,
)
from api.routers.parse import record_parse_metrics

router = APIRouter()
logger = logging.getLogger(__name__)


class CreateTaskIn(BaseModel):
    text: str
    today: Optional[date] = None


@router.post("/tasks")
async def create_task(
    payload: CreateTaskIn,
    backend: BackendAPI = Depends(get_backend),
) -> dict:
    """Quick-add a task: parse the text and store the resulting record."""
    start = time.time()
    today = payload.today or backend.parser.today()

    try:
        created = backend.add_task(payload.text, today=today)
    except ValueError as e:
        try:
            REQUESTS_TOTAL.labels(endpoint="/tasks", status="rejected").inc()
        except Exception:
            pass
        raise HTTPException(status_code=400, detail=str(e))

    task = created["task"]
    logger.info(f"Created task {task.id}: {task.text[:50]!r} on {task.date}")

    record_parse_metrics(created["parse"], today.isoformat())
    try:
        REQUESTS_TOTAL.labels(endpoint="/tasks", status="created").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/tasks").observe(time.time() - start)
        TASKS_CREATED_TOTAL.inc()
        RECENT_TASKS.set(len(state.recent_tasks))
    except Exception:
        pass

    return {
        "status": "created",
        "task": task.model_dump(mode="json"),
        "parse": created["parse"].model_dump(mode="json"),
    }


@router.get("/tasks")
async def get_tasks(limit: int = 20) -> dict:
    """Get recently added tasks, newest first."""
    tasks_list = list(state.recent_tasks)[:limit]
    return {
        "tasks": [t.model_dump(mode="json") for t in tasks_list],
        "total": len(state.recent_tasks),
    }


@router.delete("/tasks")
async def clear_tasks() -> dict:
    """Clear the in-memory task list."""
    state.recent_tasks.clear()
    try:
        RECENT_TASKS.set(0)
    except Exception:
        pass
    return {"status": "cleared"}
