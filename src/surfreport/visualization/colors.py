"""Surf condition scale used across the dashboard.

Cards are tinted by the upper end of the primary swell's face height:
- Flat: 2 ft or less (good for diving and fishing)
- Fair: 3-4 ft
- Normal: 5-7 ft (no tint)
- Rough: 8 ft and up

Colors are provided as hex strings for CSS/HTML.
"""

import re
from typing import Optional

# =============================================================================
# CONDITION SCALE
# =============================================================================

CONDITION_FLAT = "condition-flat"
CONDITION_FAIR = "condition-fair"
CONDITION_NORMAL = ""
CONDITION_ROUGH = "condition-rough"

# (css_class, hex_color, category_name)
CONDITION_SCALE = [
    (CONDITION_FLAT, "#2ECC71", "Flat"),
    (CONDITION_FAIR, "#F1C40F", "Fair"),
    (CONDITION_NORMAL, "#3498DB", "Surf"),
    (CONDITION_ROUGH, "#E74C3C", "Rough"),
]

_FIRST_NUMBER_RE = re.compile(r"(\d+)")
_RANGE_UPPER_RE = re.compile(r"\d+[-–](\d+)")


def max_face_height(face: Optional[str]) -> Optional[int]:
    """Upper bound of a face-height string, in whole feet.

    Examples:
        >>> max_face_height("5-9")
        9
        >>> max_face_height("3+")
        3
        >>> max_face_height("flat") is None
        True
    """
    if not face:
        return None
    range_match = _RANGE_UPPER_RE.search(face)
    if range_match:
        return int(range_match.group(1))
    match = _FIRST_NUMBER_RE.search(face)
    return int(match.group(1)) if match else None


def condition_class(face: Optional[str]) -> str:
    """CSS class for a card given the primary face height.

    A missing or non-numeric height counts as flat.

    Examples:
        >>> condition_class("1-2")
        'condition-flat'
        >>> condition_class("3-4")
        'condition-fair'
        >>> condition_class("5-7")
        ''
        >>> condition_class("8-12")
        'condition-rough'
    """
    height = max_face_height(face)
    if height is None or height <= 2:
        return CONDITION_FLAT
    if height <= 4:
        return CONDITION_FAIR
    if height >= 8:
        return CONDITION_ROUGH
    return CONDITION_NORMAL


def condition_to_hex(face: Optional[str]) -> str:
    """Hex color for a face height."""
    css_class = condition_class(face)
    for cls, color, _ in CONDITION_SCALE:
        if cls == css_class:
            return color
    return CONDITION_SCALE[2][1]


def condition_name(face: Optional[str]) -> str:
    """Category name for a face height ("Flat", "Fair", "Surf", "Rough")."""
    css_class = condition_class(face)
    for cls, _, name in CONDITION_SCALE:
        if cls == css_class:
            return name
    return CONDITION_SCALE[2][2]
