"""URL helpers: input normalisation and image-source resolution."""

from __future__ import annotations

from urllib.parse import urlsplit

from thumbread.scraper.errors import EmptyURLError

_SCHEMES = ("http://", "https://")

# Served in place of an image whose page URL has no usable origin.
FALLBACK_IMAGE_SOURCE = "/na"


def has_scheme(url: str) -> bool:
    """Return ``True`` if *url* starts with ``http://`` or ``https://`` (any case)."""
    return url.strip().lower().startswith(_SCHEMES)


def normalize_url(raw: str) -> str:
    """Trim *raw* and prefix ``https://`` when it carries no HTTP scheme.

    The caller's casing is preserved; only the scheme check is
    case-insensitive.

    Raises:
        EmptyURLError: If *raw* is empty or whitespace.
    """
    url = raw.strip()
    if not url:
        raise EmptyURLError("url is empty")
    if not has_scheme(url):
        url = "https://" + url
    return url


def page_origin(page_url: str) -> str | None:
    """Return ``scheme://host`` for *page_url*, or ``None`` if either part is missing."""
    try:
        parts = urlsplit(page_url)
    except ValueError:
        return None
    # host[:port] without any user:password@ prefix
    host = parts.netloc.rpartition("@")[2]
    if not parts.scheme or not host:
        return None
    return f"{parts.scheme}://{host}"


def resolve_source(source: str, page_url: str) -> str:
    """Turn an image *source* into an absolute URL using *page_url*'s origin.

    Absolute sources are returned unchanged.  Relative ones are appended to
    the origin as-is, so ``../x.png`` and ``//cdn/x.png`` are not rewritten.
    When *page_url* has no origin, :data:`FALLBACK_IMAGE_SOURCE` is returned.
    """
    if has_scheme(source):
        return source
    origin = page_origin(page_url)
    if origin is None:
        return FALLBACK_IMAGE_SOURCE
    return origin + source
