"""FastAPI application factory.

Routes
------
Mount order matters: the reader router ends with a catch-all
``GET /{url:path}``, so the stylesheet mount and the JSON API are registered
before it.

    /css          — static stylesheet
    /api/content  — JSON element list
    /             — index page
    /{url}        — reader view
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from thumbread.config import settings

from thumbread.api.routers import content as content_router
from thumbread.api.routers import reader as reader_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="thumbread",
        description=(
            "Minimal reader view: fetches a web page and reduces its body to "
            "plain paragraphs and images."
        ),
        version="0.1.0",
    )

    app.mount(
        "/css",
        StaticFiles(directory=str(settings.static_dir / "css")),
        name="css",
    )
    app.include_router(content_router.router, prefix="/api", tags=["api"])
    app.include_router(reader_router.router, tags=["reader"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn thumbread.api.app:app --reload
app = create_app()
