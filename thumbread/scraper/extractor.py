"""Content extraction: turns a parsed page into an ordered tuple of elements.

The walk is depth-first, pre-order, over the ``<body>`` subtree:

    text  → appended to the current paragraph run
    <img> → closes the current run, then emits an :class:`Image`
    <script>/<style> → whole subtree ignored

It uses an explicit stack rather than recursion, and stops descending past
``settings.max_depth`` so hostile nesting cannot exhaust the interpreter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from thumbread.config import settings
from thumbread.scraper.errors import NoBodyFound, ParseFailure
from thumbread.scraper.models import ContentElement, Image, Paragraph, split_sentences
from thumbread.scraper.urls import resolve_source

logger = logging.getLogger(__name__)

_SKIPPED_TAGS = frozenset({"script", "style"})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

@dataclass
class ExtractionContext:
    """Mutable state for a single extraction run; never shared between runs."""

    page_url: str
    buffer: str = ""
    elements: List[ContentElement] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        self.buffer += text

    def flush(self) -> None:
        """Close the current text run as a :class:`Paragraph`, if it has sentences."""
        if split_sentences(self.buffer):
            self.elements.append(Paragraph(self.buffer))
        self.buffer = ""

    def add_image(self, tag: Tag) -> None:
        self.flush()
        src = tag.get("src") or ""
        alt = tag.get("alt") or ""
        self.elements.append(
            Image(source=resolve_source(str(src), self.page_url), alt_text=str(alt))
        )


def _is_text(node: PageElement) -> bool:
    """Plain text only: comments, doctypes and CDATA are not page text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(markup: bytes | str) -> BeautifulSoup:
    """Parse *markup* into a tree with ``html5lib``.

    html5lib follows the HTML5 tree-building rules, so a ``<body>`` is created
    when the page omits it and content after ``</body>`` is moved back in.

    Raises:
        ParseFailure: If the parser rejects the document.
    """
    try:
        return BeautifulSoup(markup, "html5lib")
    except ParserRejectedMarkup as exc:
        raise ParseFailure(f"failed to parse HTML: {exc}") from exc


def locate_body(tree: BeautifulSoup) -> Tag:
    """Return the first ``<body>`` element in document order.

    Raises:
        NoBodyFound: If the document has no ``<body>``.
    """
    body = tree.find("body")
    if body is None:
        raise NoBodyFound("no body element found")
    return body


def extract_elements(body: Tag, page_url: str) -> Tuple[ContentElement, ...]:
    """Walk *body* and return its paragraphs and images in source order.

    Relative image sources are resolved against *page_url*'s origin.  A body
    with no text and no images yields an empty tuple.
    """
    ctx = ExtractionContext(page_url=page_url)
    truncated = False

    stack: List[Tuple[PageElement, int]] = [(body, 0)]
    while stack:
        node, depth = stack.pop()

        if isinstance(node, Tag):
            if node.name in _SKIPPED_TAGS:
                continue
            if node.name == "img":
                ctx.add_image(node)
            if depth >= settings.max_depth:
                truncated = True
                continue
            # Reversed so the first child is popped first.
            stack.extend((child, depth + 1) for child in reversed(node.contents))
        elif _is_text(node):
            text = node.strip()
            if text:
                ctx.add_text(text)

    ctx.flush()

    if truncated:
        logger.warning(
            "Extraction of %s stopped at depth %d; deeper content was skipped",
            page_url,
            settings.max_depth,
        )

    return tuple(ctx.elements)
