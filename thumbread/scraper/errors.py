"""Error kinds raised by the extraction pipeline.

Every stage raises its own subclass and chains the underlying cause with
``raise ... from exc``.  Callers that only need to know *that* a page could
not be read catch :class:`ThumbreadError`.
"""

from __future__ import annotations


class ThumbreadError(Exception):
    """Base class for every pipeline failure."""


class EmptyURLError(ThumbreadError):
    """The input URL was empty after trimming."""


class NetworkFailure(ThumbreadError):
    """The GET request could not be made or completed."""


class ReadFailure(ThumbreadError):
    """The response body could not be fully read."""


class ParseFailure(ThumbreadError):
    """The HTML parser rejected the document."""


class NoBodyFound(ThumbreadError):
    """The parsed document has no ``<body>`` element."""
