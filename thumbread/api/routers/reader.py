"""Reader pages rendered with Jinja2.

Routes
------
GET /              → index page with a URL form
GET /favicon.ico   → bundled icon, so browsers do not trigger a page read
GET /{url:path}    → reader view of ``url`` or a generic error page
"""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from thumbread.config import settings
from thumbread.scraper.errors import ThumbreadError
from thumbread.scraper.models import render_elements
from thumbread.scraper.pipeline import get_content

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(settings.templates_dir))

# Browsers and proxies often collapse "https://" to "https:/" inside a path.
_COLLAPSED_SCHEME = re.compile(r"^(https?):/(?!/)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _target_from_path(url: str, query: str) -> str:
    """Rebuild the raw target URL from the request path and query string."""
    target = _COLLAPSED_SCHEME.sub(r"\1://", url)
    if query:
        target = f"{target}?{query}"
    return target


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    """Serve the landing page."""
    return templates.TemplateResponse(request, "index.html")


@router.get("/favicon.ico", include_in_schema=False)
def favicon() -> FileResponse:
    return FileResponse(settings.static_dir / "favicon.ico", media_type="image/x-icon")


@router.get("/{url:path}", response_class=HTMLResponse)
def read_page(url: str, request: Request) -> HTMLResponse:
    """Render the reader view of *url*.

    Every pipeline error renders the same error page with status 500.
    """
    target = _target_from_path(url, request.url.query)
    try:
        elements = get_content(target)
    except ThumbreadError as exc:
        logger.warning("Could not read %r: %s", target, exc)
        return templates.TemplateResponse(
            request, "error.html", {"target": target}, status_code=500
        )

    return templates.TemplateResponse(
        request,
        "content.html",
        {"target": target, "content": render_elements(elements), "count": len(elements)},
    )
