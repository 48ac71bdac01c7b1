from inspection_report_builder.models import DefectItem, InformationBlock, SectionReference
from inspection_report_builder.processing.information_matcher import (
    find_information_block,
    find_information_only_sections,
    strip_section_prefix,
)


def _block(name, **kwargs):
    data = {"sectionRef": {"name": name}, "customText": "Notes"}
    data.update(kwargs)
    return InformationBlock.model_validate(data)


def test_strip_section_prefix():
    assert strip_section_prefix("9 - Roof") == "Roof"
    assert strip_section_prefix("12-Electrical") == "Electrical"
    assert strip_section_prefix("Roof") == "Roof"
    assert strip_section_prefix("Roof - 9") == "Roof - 9"


def test_prefixed_block_matches_prefixed_and_bare_sections():
    block = _block("9 - Roof")
    assert find_information_block("9 - Roof", [block]) is block
    assert find_information_block("Roof", [block]) is block


def test_similar_name_does_not_match():
    assert find_information_block("Roof", [_block("Roofing")]) is None


def test_match_is_case_sensitive():
    assert find_information_block("roof", [_block("Roof")]) is None


def test_first_matching_block_wins():
    first = _block("Roof", customText="first")
    second = _block("2 - Roof", customText="second")
    assert find_information_block("Roof", [first, second]) is first


def test_section_reference_never_matches():
    block = InformationBlock.model_validate({"sectionId": "Roof", "customText": "x"})
    assert isinstance(block.section_ref, SectionReference)
    assert find_information_block("Roof", [block]) is None


def test_empty_section_never_matches():
    assert find_information_block("", [_block("")]) is None


def test_information_only_sections_follow_defect_sections():
    defects = [DefectItem(section="Roof"), DefectItem(section="Exterior")]
    blocks = [
        _block("3 - Roof"),
        _block("5 - Plumbing"),
        _block("Plumbing"),
        _block("HVAC", customText=None),
        _block("Attic"),
    ]

    sections = find_information_only_sections(defects, blocks, last_main_number=4)

    assert [(s.number, s.name) for s in sections] == [(5, "Plumbing"), (6, "Attic")]
    assert sections[0].block is blocks[1]
