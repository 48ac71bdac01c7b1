"""Text and classification steps feeding the report assembler."""

from .color_classifier import parse_color, classify_color
from .text_segmenter import segment_defect_text, SEGMENTATION_RULES
from .numbering import sort_defects, assign_section_numbers, section_starts
from .information_matcher import (
    strip_section_prefix,
    find_information_block,
    find_information_only_sections,
)

__all__ = [
    "parse_color",
    "classify_color",
    "segment_defect_text",
    "SEGMENTATION_RULES",
    "sort_defects",
    "assign_section_numbers",
    "section_starts",
    "strip_section_prefix",
    "find_information_block",
    "find_information_only_sections",
]
