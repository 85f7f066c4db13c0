"""Centralised settings for thumbread.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT", "Mozilla/5.0 (compatible; thumbread/0.1)"
        )
    )

    # ------------------------------------------------------------------
    # Extractor
    # ------------------------------------------------------------------
    max_depth: int = field(
        default_factory=lambda: int(os.environ.get("EXTRACT_MAX_DEPTH", "256"))
    )

    # ------------------------------------------------------------------
    # Reader service
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("THUMBREAD_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("THUMBREAD_PORT", "8080"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    @property
    def templates_dir(self) -> Path:
        """Absolute path to the Jinja2 templates bundled with the package."""
        return Path(__file__).resolve().parent / "api" / "templates"

    @property
    def static_dir(self) -> Path:
        """Absolute path to the static assets bundled with the package."""
        return Path(__file__).resolve().parent / "api" / "static"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for CLI and server entry-points."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


# Module-level singleton — import this everywhere:
#   from thumbread.config import settings
settings = Settings()
