"""Associate information blocks with report sections."""

import re
from typing import Iterable, Sequence

from ..config.constants import SECTION_PREFIX_PATTERN
from ..models.defect import DefectItem
from ..models.information import InformationBlock
from ..models.report import InformationSection
from ..utils.logger import get_logger

logger = get_logger(__name__)

_SECTION_PREFIX_RE = re.compile(SECTION_PREFIX_PATTERN)


def strip_section_prefix(name: str) -> str:
    """Drop a leading ``"<digits> - "`` numbering prefix, e.g. ``"9 - Roof"`` -> ``"Roof"``."""
    return _SECTION_PREFIX_RE.sub("", name, count=1)


def find_information_block(
    section: str, blocks: Iterable[InformationBlock]
) -> InformationBlock | None:
    """
    Find the first block whose embedded section name matches a defect section.

    Both names are compared case-sensitively after stripping numbering
    prefixes. Blocks holding a bare section reference never match.

    Args:
        section: Defect section label
        blocks: Information blocks in authored order

    Returns:
        First matching block, or None
    """
    if not section:
        return None

    wanted = strip_section_prefix(section)
    for block in blocks:
        name = block.section_name
        if not name:
            continue
        if strip_section_prefix(name) == wanted:
            return block
    return None


def find_information_only_sections(
    sorted_defects: Sequence[DefectItem],
    blocks: Iterable[InformationBlock],
    last_main_number: int,
) -> list[InformationSection]:
    """
    Collect blocks with content whose section has no defects.

    They are numbered after the last defect section, in authored order, one
    entry per stripped section name.

    Args:
        sorted_defects: Defects in report order
        blocks: Information blocks in authored order
        last_main_number: Main number of the last defect section

    Returns:
        InformationSection entries to render after the defect sections
    """
    claimed = {strip_section_prefix(d.section) for d in sorted_defects}
    sections: list[InformationSection] = []
    number = last_main_number

    for block in blocks:
        name = block.section_name
        if not name or not block.has_content:
            continue
        clean_name = strip_section_prefix(name)
        if clean_name in claimed:
            continue
        claimed.add(clean_name)
        number += 1
        sections.append(InformationSection(number=number, name=clean_name, block=block))

    if sections:
        logger.debug(f"Found {len(sections)} information-only sections")
    return sections
