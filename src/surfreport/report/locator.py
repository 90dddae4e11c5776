"""Section locator for report pages.

Report pages introduce each section (a shore, the wind outlook) with a
heading, followed a few siblings later by the container holding the
section's content. Neither the heading text nor the gap is guaranteed, so
lookups are best-effort and a missing section is reported as None.
"""

import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from surfreport.utils.tree import normalize_text, walk_forward

logger = logging.getLogger(__name__)

# Heading tag that introduces each section
SECTION_HEADING_TAG = "h3"

# Class marker of the container holding a section's day boxes
MAIN_BOX_MARKER = "mainbox"

# Maximum siblings tested after a heading
MAX_HOPS = 5

HeadingPredicate = Callable[[str], bool]
ContainerPredicate = Callable[[Tag], bool]


def heading_equals(expected: str) -> HeadingPredicate:
    """Match headings whose normalized text equals ``expected``."""
    target = normalize_text(expected)
    return lambda text: text == target


def heading_starts_with(prefix: str) -> HeadingPredicate:
    """Match headings whose normalized text starts with ``prefix``."""
    target = normalize_text(prefix)
    return lambda text: text.startswith(target)


def any_heading(*predicates: HeadingPredicate) -> HeadingPredicate:
    """Match headings satisfying any of the given predicates."""
    return lambda text: any(p(text) for p in predicates)


def has_class_marker(marker: str) -> ContainerPredicate:
    """Match tags whose class attribute contains ``marker``.

    This is a substring test on the full class string, so "mainbox" also
    matches "mainbox-wide".
    """
    def predicate(node: Tag) -> bool:
        classes = node.get("class") or []
        if isinstance(classes, str):
            classes = [classes]
        return marker in " ".join(classes)
    return predicate


def locate_section(
    document: BeautifulSoup | Tag,
    heading_predicate: HeadingPredicate,
    container_predicate: ContainerPredicate,
    max_hops: int = MAX_HOPS,
    heading_tag: str = SECTION_HEADING_TAG,
) -> Optional[Tag]:
    """Find the content container of a named section.

    Args:
        document: Parsed document (or any subtree) to search
        heading_predicate: Test on each heading's trimmed, lower-cased text
        container_predicate: Test identifying the section's container
        max_hops: Maximum number of siblings tested after the heading
        heading_tag: Tag name of section headings

    Returns:
        The container tag, or None if no heading matches or no container
        follows within ``max_hops`` siblings. Only the first matching
        heading is considered.

    Example:
        >>> box = locate_section(soup, heading_equals("north"), has_class_marker("mainbox"))
    """
    for heading in document.find_all(heading_tag):
        if not heading_predicate(normalize_text(heading.get_text())):
            continue
        container = walk_forward(heading, container_predicate, max_hops)
        if container is None:
            logger.debug(
                f"Heading '{heading.get_text().strip()}' has no container "
                f"within {max_hops} siblings"
            )
        return container
    return None
