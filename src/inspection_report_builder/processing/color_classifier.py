"""Classify CSS color expressions into severity categories."""

import re

from ..config.constants import FALLBACK_SEVERITY, REFERENCE_COLORS
from ..models.defect import Severity

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})")


def parse_color(expression: str | None) -> RGB | None:
    """
    Parse a hex or ``rgb()``/``rgba()`` color into an RGB triple.

    Args:
        expression: Color such as ``#f59e0b``, ``#F90`` or ``rgba(245, 158, 11, .5)``

    Returns:
        (r, g, b) tuple, or None if the expression is missing or unparseable
    """
    if not expression:
        return None

    text = str(expression).strip().lower()

    hex_match = _HEX_RE.match(text)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    rgb_match = _RGB_RE.match(text)
    if rgb_match:
        r, g, b = (min(255, int(channel)) for channel in rgb_match.groups())
        return (r, g, b)

    return None


def nearest_severity(rgb: RGB) -> Severity:
    """Pick the reference color with the smallest squared distance; earlier entries win ties."""
    best = FALLBACK_SEVERITY
    best_distance = float("inf")
    for severity, (ref_r, ref_g, ref_b) in REFERENCE_COLORS.items():
        distance = (rgb[0] - ref_r) ** 2 + (rgb[1] - ref_g) ** 2 + (rgb[2] - ref_b) ** 2
        if distance < best_distance:
            best, best_distance = severity, distance
    return best


def classify_color(expression: str | None) -> Severity:
    """Map any color expression to a severity. Unparseable input is Immediate Attention."""
    rgb = parse_color(expression)
    if rgb is None:
        return FALLBACK_SEVERITY
    return nearest_severity(rgb)
