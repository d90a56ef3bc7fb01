"""
Tree search over a parsed document.

Everything here is read-only: nodes are inspected, never modified.

Traversal is depth-first pre-order in document order: a node is tested
before its children, and children are visited left to right. The search
root itself is part of the walk.

Predicates are plain functions Node -> bool. Small builders (tag_is,
attr_contains, has_attribute, any_of, all_of) compose the ones the
extraction profiles need.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

logger = logging.getLogger(__name__)

Node = PageElement
Predicate = Callable[[Node], bool]


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


class Step(str, Enum):
    """One step of a structural path."""

    FIRST_CHILD = "first_child"
    NEXT_SIBLING = "next_sibling"


# ---------------------------------------------------------------------------
# Node inspection
# ---------------------------------------------------------------------------


def node_kind(node: Optional[Node]) -> NodeKind:
    """
    Classify a node as element, text or other.

    The document object itself, comments, doctypes, CDATA sections and
    processing instructions are OTHER. Script/style content is TEXT.
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.OTHER
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def is_element(node: Optional[Node], tag: Optional[str] = None) -> bool:
    if node_kind(node) is not NodeKind.ELEMENT:
        return False
    return tag is None or node.name == tag


def is_text(node: Optional[Node]) -> bool:
    return node_kind(node) is NodeKind.TEXT


def has_attr(node: Optional[Node], key: str) -> bool:
    return is_element(node) and key in node.attrs


def get_attr(node: Optional[Node], key: str, default: str = "") -> str:
    """
    Value of attribute `key`, or `default` if the node is not an element or
    has no such attribute.
    """
    if not is_element(node):
        return default
    value = node.attrs.get(key)
    if value is None:
        return default
    # multi-valued attributes are disabled in the parser adapter, but a tree
    # built elsewhere may still carry lists
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def children(node: Optional[Node]) -> List[Node]:
    if isinstance(node, Tag):
        return list(node.contents)
    return []


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def tag_is(*names: str) -> Predicate:
    """Element whose tag name is one of `names`."""
    wanted = frozenset(names)

    def predicate(node: Node) -> bool:
        return is_element(node) and node.name in wanted

    return predicate


def has_attribute(tag: Optional[str], key: str) -> Predicate:
    """Element (optionally restricted to `tag`) carrying attribute `key`."""

    def predicate(node: Node) -> bool:
        return is_element(node, tag) and key in node.attrs

    return predicate


def attr_contains(tag: Optional[str], key: str, marker: str) -> Predicate:
    """Element (optionally restricted to `tag`) whose `key` attribute contains `marker`."""

    def predicate(node: Node) -> bool:
        return is_element(node, tag) and key in node.attrs and marker in get_attr(node, key)

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    def predicate(node: Node) -> bool:
        return any(p(node) for p in predicates)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    def predicate(node: Node) -> bool:
        return all(p(node) for p in predicates)

    return predicate


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def walk(root: Optional[Node], prune: Optional[Predicate] = None) -> Iterator[Node]:
    """
    Yield `root` and its descendants in document order (pre-order).

    If `prune` is given, the children of a node for which it returns True are
    not visited (the node itself is still yielded). Uses an explicit stack,
    so deeply nested markup does not hit the recursion limit.
    """
    if root is None:
        return
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        if prune is not None and prune(node):
            continue
        # reversed, so the leftmost child is popped first
        stack.extend(reversed(children(node)))


def find_all(root: Optional[Node], predicate: Predicate, descend_into_matches: bool = True) -> List[Node]:
    """
    All nodes under (and including) `root` that satisfy `predicate`, in
    document order.

    With descend_into_matches=False the subtree below a match is skipped,
    so a match nested inside another match is not reported.
    """
    if descend_into_matches:
        return [node for node in walk(root) if predicate(node)]

    matches: List[Node] = []

    def prune(node: Node) -> bool:
        if predicate(node):
            matches.append(node)
            return True
        return False

    for _ in walk(root, prune=prune):
        pass
    return matches


def find_first(root: Optional[Node], predicate: Predicate) -> Optional[Node]:
    """First node in document order under (and including) `root` matching `predicate`."""
    for node in walk(root):
        if predicate(node):
            return node
    return None


# ---------------------------------------------------------------------------
# Structural paths
# ---------------------------------------------------------------------------


def first_child(node: Optional[Node]) -> Optional[Node]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def next_sibling(node: Optional[Node]) -> Optional[Node]:
    if node is None:
        return None
    return node.next_sibling


_STEPS = {
    Step.FIRST_CHILD: first_child,
    Step.NEXT_SIBLING: next_sibling,
}


def follow_path(node: Optional[Node], steps: Sequence[Step]) -> Optional[Node]:
    """
    Follow a fixed chain of first-child / next-sibling steps.

    Returns None as soon as a step has nowhere to go.
    """
    current = node
    for i, step in enumerate(steps):
        current = _STEPS[Step(step)](current)
        if current is None:
            logger.debug("Structural path ended at step %d (%s)", i, Step(step).value)
            return None
    return current
