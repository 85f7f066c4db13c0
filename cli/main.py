"""thumbread CLI — entry-point for reading pages and running the service.

Usage:
    python cli/main.py --help

Commands:
    read   → run the reader pipeline on one URL and print the result
    serve  → start the reader web service
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from thumbread.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from thumbread.config import configure_logging, settings
from thumbread.scraper.errors import ThumbreadError
from thumbread.scraper.models import element_to_dict, render_element
from thumbread.scraper.pipeline import get_content

app = typer.Typer(
    name="thumbread",
    help="Minimal reader view for web pages.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level)


@app.command("read")
def read(
    url: str = typer.Argument(..., help="Page to read; https:// is assumed."),
    as_json: bool = typer.Option(False, "--json", help="Print elements as JSON."),
) -> None:
    """Fetch a page and print its paragraphs and images."""
    try:
        elements = get_content(url)
    except ThumbreadError as exc:
        typer.echo(f"[read] Failed: {exc}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([element_to_dict(e) for e in elements], indent=2))
        return

    if not elements:
        typer.echo("[read] No readable content found.")
        return
    for element in elements:
        typer.echo(render_element(element))


@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the reader web service with uvicorn."""
    import uvicorn

    typer.echo(f"[serve] Listening on http://{host}:{port}")
    uvicorn.run("thumbread.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
