"""HTTP fetcher: one GET, whole body read into memory."""

from __future__ import annotations

import logging

import httpx

from thumbread.config import settings
from thumbread.scraper.errors import NetworkFailure, ReadFailure
from thumbread.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    No retries are made.  Error statuses are not raised: the body of a 404
    page is still a page, and the status is kept on the result.

    Raises:
        NetworkFailure: If the request cannot be sent or the server does not
            respond.
        ReadFailure: If the response body cannot be fully read.
    """
    logger.debug("Fetching %s", url)

    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        try:
            request = client.build_request("GET", url)
        except (httpx.InvalidURL, UnicodeError) as exc:
            raise NetworkFailure(f"failed to make GET request: {exc}") from exc

        # Hosts that fail IDNA encoding raise UnicodeError, not an httpx error.
        try:
            response = client.send(request, stream=True)
        except (httpx.HTTPError, UnicodeError) as exc:
            raise NetworkFailure(f"failed to make GET request: {exc}") from exc

        try:
            content = response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise ReadFailure(f"failed to read response body: {exc}") from exc
        finally:
            response.close()

    if response.is_error:
        logger.warning("GET %s returned HTTP %d", url, response.status_code)
    logger.debug("Fetched %s (%d bytes)", url, len(content))

    return RawPage(url=url, content=content, status_code=response.status_code)
