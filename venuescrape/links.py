"""
Link extraction (HTML -> list[Link]).
"""

from __future__ import annotations

import logging
from typing import List

from venuescrape.document import DocumentSource, parse_document
from venuescrape.model import Link
from venuescrape.text import extract_text
from venuescrape.tree import Node, find_all, get_attr, is_element

logger = logging.getLogger(__name__)


def is_anchor(node: Node) -> bool:
    return is_element(node, "a")


def build_link(anchor: Node) -> Link:
    """
    Build a Link from an <a> element: href attribute ("" if absent) and the
    anchor's normalized text.
    """
    return Link(href=get_attr(anchor, "href"), text=extract_text(anchor))


def extract_links(root: Node) -> List[Link]:
    """All links below `root`, in document order."""
    links = [build_link(anchor) for anchor in find_all(root, is_anchor)]
    logger.debug("Found %d links", len(links))
    return links


def parse_links(document: DocumentSource) -> List[Link]:
    """
    Parse an HTML document and return one Link per <a> element, in document
    order. Raises DocumentParseError if the input cannot be parsed.
    """
    return extract_links(parse_document(document))
