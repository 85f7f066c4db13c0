"""Reader pipeline entry point.

``get_content`` runs the whole chain for one raw URL:

    normalize → fetch → parse → locate <body> → extract elements

Each call is independent; the page URL is passed down explicitly so
concurrent calls cannot see each other's origin.
"""

from __future__ import annotations

from typing import Tuple

from thumbread.scraper.extractor import extract_elements, locate_body, parse_document
from thumbread.scraper.fetcher import fetch_url
from thumbread.scraper.models import ContentElement
from thumbread.scraper.urls import normalize_url


def get_content(raw_url: str) -> Tuple[ContentElement, ...]:
    """Fetch *raw_url* and reduce its body to paragraphs and images.

    Args:
        raw_url: URL as typed by the user; ``https://`` is assumed when no
            scheme is given.

    Returns:
        The page's elements in source order.  May be empty.

    Raises:
        ThumbreadError: One of its subclasses, for whichever stage failed.
    """
    url = normalize_url(raw_url)
    raw = fetch_url(url)
    tree = parse_document(raw.content)
    body = locate_body(tree)
    return extract_elements(body, url)
