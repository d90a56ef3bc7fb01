"""
Text extraction.

extract_text() concatenates the text nodes below a node, separated by single
spaces, then collapses whitespace runs and trims the result. Normalization
runs once per call on the fully concatenated string.
"""

from __future__ import annotations

from typing import List, Optional

from venuescrape.tree import Node, NodeKind, node_kind, walk


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (incl. newlines, tabs, NBSP) into one space and trim."""
    return " ".join(text.split())


def extract_text(node: Optional[Node]) -> str:
    """
    Text content of `node`.

    - None (absent node) -> ""
    - text node -> its raw payload, unmodified
    - element -> all descendant text in document order, normalized
    - anything else (document, comment, doctype, ...) -> ""
    """
    kind = node_kind(node)
    if kind is NodeKind.TEXT:
        return str(node)
    if kind is not NodeKind.ELEMENT:
        return ""

    parts: List[str] = [str(n) for n in walk(node) if node_kind(n) is NodeKind.TEXT]
    return normalize_whitespace(" ".join(parts))
