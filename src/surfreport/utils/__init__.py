"""Shared utilities for surfreport pipelines."""

from .base import SourcePipeline, ValidationResult
from .tree import next_element_sibling, normalize_text, walk_forward

__all__ = [
    "SourcePipeline",
    "ValidationResult",
    "next_element_sibling",
    "normalize_text",
    "walk_forward",
]
