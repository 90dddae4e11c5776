"""Visualization helpers for the surf report dashboard."""

from surfreport.visualization.colors import (
    CONDITION_FAIR,
    CONDITION_FLAT,
    CONDITION_NORMAL,
    CONDITION_ROUGH,
    CONDITION_SCALE,
    condition_class,
    condition_name,
    condition_to_hex,
    max_face_height,
)

__all__ = [
    "CONDITION_FAIR",
    "CONDITION_FLAT",
    "CONDITION_NORMAL",
    "CONDITION_ROUGH",
    "CONDITION_SCALE",
    "condition_class",
    "condition_name",
    "condition_to_hex",
    "max_face_height",
]
