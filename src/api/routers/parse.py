import logging
import time
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.backend import BackendAPI
from api.dependencies import get_backend
from api.metrics import (
    REQUESTS_TOTAL,
    REQUEST_LATENCY_SECONDS,
    FIELDS_EXTRACTED_TOTAL,
    PARSE_CONFIDENCE,
)
from quick_add.models import ParseResult

router = APIRouter()
logger = logging.getLogger(__name__)

_COUNTED_FIELDS = ("time", "duration", "location", "category")


class ParseIn(BaseModel):
    text: str
    today: Optional[date] = None  # pin "today" for reproducible results


def record_parse_metrics(result: ParseResult, today: str) -> None:
    """Best-effort counters for which fields a parse recognised."""
    try:
        for field in _COUNTED_FIELDS:
            if getattr(result, field) is not None:
                FIELDS_EXTRACTED_TOTAL.labels(field=field).inc()
        if result.date != today:
            FIELDS_EXTRACTED_TOTAL.labels(field="date").inc()
        if result.priority != "medium":
            FIELDS_EXTRACTED_TOTAL.labels(field="priority").inc()
        if result.tags:
            FIELDS_EXTRACTED_TOTAL.labels(field="tags").inc()
        PARSE_CONFIDENCE.observe(result.confidence)
    except Exception as e:
        logger.debug(f"Could not record parse metrics: {e}")


@router.post("/parse")
async def parse_text(
    payload: ParseIn,
    backend: BackendAPI = Depends(get_backend),
) -> ParseResult:
    start = time.time()
    today = payload.today or backend.parser.today()

    result = backend.parse_text(payload.text, today=today)
    logger.info(f"Parsed quick-add text: {payload.text[:50]!r} (confidence {result.confidence})")

    record_parse_metrics(result, today.isoformat())
    try:
        REQUESTS_TOTAL.labels(endpoint="/parse", status="parsed").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/parse").observe(time.time() - start)
    except Exception:
        pass

    return result


@router.get("/examples")
async def quick_examples(backend: BackendAPI = Depends(get_backend)) -> dict:
    """Example inputs the UI offers as one-click quick adds."""
    return {"examples": backend.parser.get_quick_examples()}
