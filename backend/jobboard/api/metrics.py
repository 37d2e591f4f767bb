"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics() -> Response:
    """Expose HTTP, search, saved-item and alert metrics in text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
