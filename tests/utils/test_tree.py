"""Tests for tree walking helpers."""

from bs4 import BeautifulSoup

from surfreport.utils.tree import next_element_sibling, normalize_text, walk_forward


class Node:
    """Minimal linked node for walking without a parser."""

    def __init__(self, value, next_node=None):
        self.value = value
        self.next_node = next_node


def _chain(*values):
    head = None
    for value in reversed(values):
        head = Node(value, head)
    return head


def _step(node):
    return node.next_node


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_trims_and_lowers(self):
        """Whitespace is trimmed and case folded."""
        assert normalize_text("  North \n") == "north"

    def test_none(self):
        """None becomes an empty string."""
        assert normalize_text(None) == ""


class TestWalkForward:
    """Tests for walk_forward."""

    def test_start_not_tested(self):
        """The start node itself never matches."""
        start = _chain("x", "a", "x")
        found = walk_forward(start, lambda n: n.value == "x", 5, step=_step)
        assert found is start.next_node.next_node

    def test_hop_limit(self):
        """At most max_hops nodes are tested."""
        start = _chain("start", "a", "b", "target")
        assert walk_forward(start, lambda n: n.value == "target", 2, step=_step) is None
        assert walk_forward(start, lambda n: n.value == "target", 3, step=_step).value == "target"

    def test_end_of_chain(self):
        """Walking off the end gives None."""
        start = _chain("start", "a")
        assert walk_forward(start, lambda n: False, 10, step=_step) is None

    def test_zero_hops(self):
        """Zero hops never matches."""
        start = _chain("start", "target")
        assert walk_forward(start, lambda n: True, 0, step=_step) is None


class TestNextElementSibling:
    """Tests for next_element_sibling."""

    def test_skips_text(self):
        """Text nodes between tags are skipped."""
        soup = BeautifulSoup("<h3>A</h3> some text <p>B</p>", "html.parser")
        assert next_element_sibling(soup.h3).name == "p"

    def test_last_sibling(self):
        """The last element has no next sibling."""
        soup = BeautifulSoup("<div><p>only</p> trailing</div>", "html.parser")
        assert next_element_sibling(soup.p) is None
