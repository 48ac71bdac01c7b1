from inspection_report_builder.models import DefectItem
from inspection_report_builder.processing.numbering import (
    assign_section_numbers,
    section_starts,
    sort_defects,
)


def _defect(section, subsection, description=""):
    return DefectItem(section=section, subsection=subsection, description=description)


def test_numbering_example():
    defects = sort_defects([_defect("B", "z"), _defect("A", "y"), _defect("A", "x")])
    numbers = assign_section_numbers(defects, start_number=1)

    assert [str(n) for n in numbers] == ["2.1", "2.2", "3.1"]
    assert [(d.section, d.subsection) for d in defects] == [("A", "x"), ("A", "y"), ("B", "z")]


def test_start_number_offsets_main():
    numbers = assign_section_numbers([_defect("A", "x")], start_number=10)
    assert numbers[0].main == 11
    assert numbers[0].sub == 1


def test_sort_is_stable_for_equal_keys():
    defects = [_defect("A", "x", "first"), _defect("A", "x", "second"), _defect("A", "x", "third")]
    assert [d.description for d in sort_defects(defects)] == ["first", "second", "third"]


def test_sort_is_case_sensitive_code_point_order():
    defects = sort_defects([_defect("roof", "a"), _defect("Roof", "a")])
    assert [d.section for d in defects] == ["Roof", "roof"]


def test_section_starts():
    defects = sort_defects([_defect("A", "x"), _defect("A", "y"), _defect("B", "z")])
    assert section_starts(defects) == [True, False, True]


def test_empty_input():
    assert assign_section_numbers([]) == []
    assert section_starts([]) == []
