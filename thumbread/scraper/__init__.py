"""Scraper package — web fetch & reader-view extraction."""

from thumbread.scraper.errors import (
    EmptyURLError,
    NetworkFailure,
    NoBodyFound,
    ParseFailure,
    ReadFailure,
    ThumbreadError,
)
from thumbread.scraper.extractor import extract_elements, locate_body, parse_document
from thumbread.scraper.fetcher import fetch_url
from thumbread.scraper.models import (
    ContentElement,
    Image,
    Paragraph,
    RawPage,
    render_element,
    render_elements,
)
from thumbread.scraper.pipeline import get_content
from thumbread.scraper.urls import normalize_url, resolve_source

__all__ = [
    "get_content",
    "normalize_url",
    "resolve_source",
    "fetch_url",
    "parse_document",
    "locate_body",
    "extract_elements",
    "render_element",
    "render_elements",
    "ContentElement",
    "Paragraph",
    "Image",
    "RawPage",
    "ThumbreadError",
    "EmptyURLError",
    "NetworkFailure",
    "ReadFailure",
    "ParseFailure",
    "NoBodyFound",
]
