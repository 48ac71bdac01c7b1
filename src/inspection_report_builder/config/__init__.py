"""Configuration management for the inspection report builder."""

from .settings import Settings, settings
from .constants import (
    REFERENCE_COLORS,
    FALLBACK_SEVERITY,
    SEVERITY_CSS_CLASSES,
    SECTION_PREFIX_PATTERN,
    DEFECTS_PER_PAGE,
)

__all__ = [
    "Settings",
    "settings",
    "REFERENCE_COLORS",
    "FALLBACK_SEVERITY",
    "SEVERITY_CSS_CLASSES",
    "SECTION_PREFIX_PATTERN",
    "DEFECTS_PER_PAGE",
]
