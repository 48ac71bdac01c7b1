"""Sort defects and assign hierarchical section numbers."""

from typing import Iterable, Sequence

from ..models.defect import DefectItem
from ..models.report import SectionNumber


def sort_defects(defects: Iterable[DefectItem]) -> list[DefectItem]:
    """Stable sort by (section, subsection); equal keys keep input order."""
    return sorted(defects, key=lambda d: d.sort_key)


def assign_section_numbers(
    sorted_defects: Sequence[DefectItem], start_number: int = 1
) -> list[SectionNumber]:
    """
    Number an already sorted defect sequence as ``main.sub``.

    The main counter starts at ``start_number`` and is incremented on every
    section change, so the first section is ``start_number + 1``. The sub
    counter restarts at 1 on a section change and otherwise counts defects.

    The detail sections and both summary tables all read from this one list.

    Args:
        sorted_defects: Output of sort_defects
        start_number: Base section number

    Returns:
        One SectionNumber per defect, parallel to the input
    """
    numbers: list[SectionNumber] = []
    main = start_number
    sub = 0
    previous_section: str | None = None

    for defect in sorted_defects:
        if defect.section != previous_section:
            main += 1
            sub = 1
            previous_section = defect.section
        else:
            sub += 1
        numbers.append(SectionNumber(main=main, sub=sub))

    return numbers


def section_starts(sorted_defects: Sequence[DefectItem]) -> list[bool]:
    """True for each defect that opens a new section."""
    starts = []
    previous_section: str | None = None
    for defect in sorted_defects:
        starts.append(defect.section != previous_section)
        previous_section = defect.section
    return starts
