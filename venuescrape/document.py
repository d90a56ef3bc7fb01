"""
Document parser adapter (raw HTML -> tree).

The rest of the package only walks the tree returned by parse_document().
BeautifulSoup with the stdlib "html.parser" builder is lenient: anything
that is text at all becomes a tree, so a DocumentParseError means the input
was not a document (wrong type, unreadable stream, parser rejection).

Parser options that the extractors rely on:
- on_duplicate_attribute="ignore": the FIRST occurrence of a repeated
  attribute key wins
- multi_valued_attributes=None: "class" stays one raw string, so marker
  tests are plain substring tests on the attribute value

The returned tree must be treated as read-only.
"""

from __future__ import annotations

import logging
import warnings
from typing import IO, Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup

from venuescrape.errors import DocumentParseError

logger = logging.getLogger(__name__)

PARSER_FEATURES = "html.parser"

DocumentSource = Union[str, bytes, IO[str], IO[bytes]]


def _read_source(source: DocumentSource) -> Union[str, bytes]:
    if isinstance(source, (str, bytes)):
        return source
    if isinstance(source, bytearray):
        return bytes(source)

    read = getattr(source, "read", None)
    if not callable(read):
        raise DocumentParseError(f"cannot parse object of type {type(source).__name__} as HTML")

    try:
        data = read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentParseError(f"failed to read document stream: {exc}") from exc

    if not isinstance(data, (str, bytes)):
        raise DocumentParseError(f"document stream returned {type(data).__name__}, expected str or bytes")
    return data


def parse_document(source: DocumentSource) -> BeautifulSoup:
    """
    Parse one complete HTML document and return the root of its tree.

    `source` may be a str, bytes (encoding is detected) or a readable
    text/binary stream. Empty or whitespace-only input gives an empty tree.
    """
    markup = _read_source(source)

    try:
        with warnings.catch_warnings():
            # The input is always markup, never a file name or URL.
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(
                markup,
                PARSER_FEATURES,
                on_duplicate_attribute="ignore",
                multi_valued_attributes=None,
            )
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(f"parser rejected document: {exc}") from exc

    logger.debug("Parsed document (length %d)", len(markup))
    return soup
