"""Ordered pattern tables for best-effort text extraction.

A rule table is a list of ``PatternRule`` entries. The rank of each rule is
part of the extraction contract: tables are always tried in ascending rank,
and the first rule that produces a value wins.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PatternRule(Generic[T]):
    """One alternative in an ordered extraction table.

    Attributes:
        name: Short identifier, reported back to callers where useful
        pattern: Compiled regular expression
        rank: Precedence (lower is tried first)
        extract: Builds the result from a successful match; may return None
            to reject the match and let later rules run
    """

    name: str
    pattern: re.Pattern
    rank: int
    extract: Callable[[re.Match], Optional[T]]


def rule(name: str, pattern: str, rank: int, extract: Callable[[re.Match], Any], flags: int = 0) -> PatternRule:
    """Build a PatternRule from a pattern string."""
    return PatternRule(name=name, pattern=re.compile(pattern, flags), rank=rank, extract=extract)


def ordered(rules: Sequence[PatternRule[T]]) -> list[PatternRule[T]]:
    """Return rules sorted by rank, rejecting duplicate ranks."""
    ranks = [r.rank for r in rules]
    if len(ranks) != len(set(ranks)):
        raise ValueError(f"Duplicate rule ranks: {ranks}")
    return sorted(rules, key=lambda r: r.rank)


def first_match(rules: Sequence[PatternRule[T]], text: str) -> Optional[T]:
    """Try each rule in rank order and return the first extracted value.

    Args:
        rules: Rule table (sorted by ``ordered``)
        text: Text to search

    Returns:
        The value produced by the first matching rule, or None.
    """
    if not text:
        return None
    for r in rules:
        match = r.pattern.search(text)
        if match is None:
            continue
        value = r.extract(match)
        if value is not None:
            return value
    return None


def leftmost_match(rules: Sequence[PatternRule[T]], text: str, flags: int = 0) -> Optional[T]:
    """Return the value of the rule matching earliest in the text.

    Rules are combined into a single alternation in rank order, so the
    leftmost occurrence wins and rank only breaks ties at the same position.
    """
    if not text:
        return None
    combined = _combine(tuple(rules), flags)
    match = combined.search(text)
    if match is None:
        return None
    index = next(
        i for i in range(len(rules)) if match.group(f"r{i}") is not None
    )
    winner = rules[index]
    # Re-run the winning rule on the matched span to give it its own groups
    own = winner.pattern.match(text, match.start())
    return winner.extract(own) if own is not None else None


_COMBINED_CACHE: dict[tuple, re.Pattern] = {}


def _combine(rules: tuple, flags: int) -> re.Pattern:
    key = (tuple(r.pattern.pattern for r in rules), flags)
    if key not in _COMBINED_CACHE:
        alternation = "|".join(
            f"(?P<r{i}>{r.pattern.pattern})" for i, r in enumerate(rules)
        )
        _COMBINED_CACHE[key] = re.compile(alternation, flags)
    return _COMBINED_CACHE[key]
