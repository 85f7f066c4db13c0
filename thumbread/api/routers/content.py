"""JSON content endpoint.

Routes
------
GET /api/content?url=<raw url>    → ordered element list for the page
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from thumbread.scraper.errors import ThumbreadError
from thumbread.scraper.models import element_to_dict
from thumbread.scraper.pipeline import get_content
from thumbread.scraper.urls import normalize_url

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ContentResponse(BaseModel):
    url: str
    elements: list[dict[str, Any]]


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("/content", response_model=ContentResponse)
def content_endpoint(url: str = Query(..., min_length=1)) -> dict[str, Any]:
    """Fetch *url* and return its paragraphs and images as JSON.

    Any pipeline failure maps to a single 502 response; the cause is logged.
    """
    try:
        elements = get_content(url)
    except ThumbreadError as exc:
        logger.warning("Could not read %r: %s", url, exc)
        raise HTTPException(status_code=502, detail="Could not read page.") from exc
    return {
        "url": normalize_url(url),
        "elements": [element_to_dict(e) for e in elements],
    }
