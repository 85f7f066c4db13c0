"""Data models for the reader pipeline.

The content model is a closed union: a page reduces to an ordered tuple of
:class:`Paragraph` and :class:`Image` values, and :func:`render_element`
is the one place that knows how each kind turns into markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Literal, Tuple, Union

from markupsafe import Markup


@dataclass(frozen=True)
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    content: bytes
    status_code: int


@dataclass(frozen=True)
class Paragraph:
    """One contiguous run of page text, holding one or more sentences."""

    text: str
    kind: Literal["paragraph"] = field(default="paragraph", init=False)

    def __post_init__(self) -> None:
        if not self.sentences:
            raise ValueError(f"Paragraph needs at least one sentence, got {self.text!r}")

    @property
    def sentences(self) -> Tuple[str, ...]:
        """Split :attr:`text` on ``.`` into trimmed, period-terminated sentences."""
        return split_sentences(self.text)

    def render(self) -> Markup:
        return render_element(self)


@dataclass(frozen=True)
class Image:
    """An image with an absolute (or placeholder) source."""

    source: str
    alt_text: str = ""
    kind: Literal["image"] = field(default="image", init=False)

    def render(self) -> Markup:
        return render_element(self)


ContentElement = Union[Paragraph, Image]


def split_sentences(text: str) -> Tuple[str, ...]:
    """Return the non-empty ``.``-separated pieces of *text*, each ending in ``.``."""
    return tuple(
        f"{piece}." for piece in (part.strip() for part in text.split(".")) if piece
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_paragraph(paragraph: Paragraph) -> Markup:
    return Markup("").join(
        Markup("<p>{}</p>").format(sentence) for sentence in paragraph.sentences
    )


def _render_image(image: Image) -> Markup:
    return Markup('<img src="{}" alt="{}">').format(image.source, image.alt_text)


def render_element(element: ContentElement) -> Markup:
    """Render *element* to an HTML fragment.

    Text and attribute values are escaped; the returned :class:`Markup` is
    safe to embed in a Jinja2 template as-is.

    Raises:
        TypeError: If *element* is not a :class:`Paragraph` or :class:`Image`.
    """
    if isinstance(element, Paragraph):
        return _render_paragraph(element)
    if isinstance(element, Image):
        return _render_image(element)
    raise TypeError(f"Cannot render {type(element).__name__!r} as a content element")


def render_elements(elements: Iterable[ContentElement]) -> Markup:
    """Render *elements* in order and join the fragments."""
    return Markup("").join(render_element(e) for e in elements)


def element_to_dict(element: ContentElement) -> Dict[str, Any]:
    """Return the JSON shape of *element* used by the API and the CLI."""
    if isinstance(element, Paragraph):
        return {
            "kind": element.kind,
            "text": element.text,
            "sentences": list(element.sentences),
        }
    if isinstance(element, Image):
        return {
            "kind": element.kind,
            "source": element.source,
            "alt_text": element.alt_text,
        }
    raise TypeError(f"Cannot serialise {type(element).__name__!r} as a content element")
