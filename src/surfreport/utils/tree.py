"""Generic helpers for walking document trees.

The walk functions take a ``step`` callable instead of assuming a parsing
library, so they work over BeautifulSoup tags as well as any other
tree-shaped structure that can name a node's next sibling.
"""

from typing import Callable, Optional, TypeVar

from bs4 import Tag

NodeT = TypeVar("NodeT")


def normalize_text(text: Optional[str]) -> str:
    """Trim and lower-case text for heading comparisons."""
    if not text:
        return ""
    return text.strip().lower()


def next_element_sibling(node):
    """Return the next sibling that is an element (skips text nodes).

    Mirrors DOM ``nextElementSibling`` for BeautifulSoup tags.
    """
    sibling = node.next_sibling
    while sibling is not None and not isinstance(sibling, Tag):
        sibling = sibling.next_sibling
    return sibling


def walk_forward(
    start: NodeT,
    predicate: Callable[[NodeT], bool],
    max_hops: int,
    step: Callable[[NodeT], Optional[NodeT]] = next_element_sibling,
) -> Optional[NodeT]:
    """Find the first node after ``start`` that satisfies ``predicate``.

    Follows ``step`` from ``start`` and tests at most ``max_hops`` nodes.
    ``start`` itself is never tested.

    Args:
        start: Node to walk from (e.g. a section heading)
        predicate: Test applied to each visited node
        max_hops: Maximum number of nodes to test
        step: Function returning the next node, or None at the end

    Returns:
        The first matching node, or None if the walk ends or the hop
        limit is reached first.

    Example:
        >>> container = walk_forward(heading, lambda n: "mainbox" in n.get("class", []), 5)
    """
    node = step(start)
    hops = 0
    while node is not None and hops < max_hops:
        if predicate(node):
            return node
        node = step(node)
        hops += 1
    return None
