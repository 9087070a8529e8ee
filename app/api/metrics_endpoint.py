"""Prometheus scrape endpoint.

Returns the text exposition format (not JSON), e.g.:

  purchases_completed_total{result="recorded"} 12.0
  http_requests_total{method="GET",endpoint="/api/courses",status_code="200"} 1432.0

Restrict access in production (scraper IP allow-list or an internal
port); purchase counters reveal sales volume.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["observability"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
