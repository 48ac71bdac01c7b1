import pytest
from pydantic import ValidationError

from inspection_report_builder.models import (
    DefectItem,
    EmbeddedSection,
    InformationBlock,
    ReportMeta,
    ReportType,
    SectionReference,
)


def test_defect_accepts_camel_case_and_snake_case():
    camel = DefectItem.model_validate(
        {"materialCost": 100, "laborType": "Roofer", "laborRate": 50, "hoursRequired": 2}
    )
    snake = DefectItem.model_validate(
        {"material_cost": 100, "labor_type": "Roofer", "labor_rate": 50, "hours_required": 2}
    )
    assert camel == snake
    assert camel.total_cost == 200


def test_defect_alternate_wire_names():
    defect = DefectItem.model_validate(
        {"defectDescription": "Leak under sink", "materialTotalCost": 25}
    )
    assert defect.description == "Leak under sink"
    assert defect.material_cost == 25


def test_defect_nulls_and_blanks_take_defaults():
    defect = DefectItem.model_validate(
        {"location": None, "color": "", "laborType": "  ", "recommendation": None, "laborRate": None}
    )
    assert defect.location == "Not specified"
    assert defect.color == "#d63636"
    assert defect.labor_type == "N/A"
    assert defect.recommendation == "N/A"
    assert defect.labor_rate == 0


def test_defect_rejects_non_mapping():
    with pytest.raises(ValidationError):
        DefectItem.model_validate("not a defect")


def test_defect_additional_images():
    defect = DefectItem.model_validate(
        {"additionalImages": [{"url": "https://x/a.jpg", "location": "Garage"}, {"url": "b.jpg"}]}
    )
    assert [img.location for img in defect.additional_images] == ["Garage", None]


def test_report_meta_defaults():
    meta = ReportMeta.model_validate({"date": "October 19, 2026"})
    assert meta.title == "Inspection Report"
    assert meta.subtitle == "Defect Summary and Details"
    assert meta.start_number == 1
    assert meta.report_type == ReportType.FULL
    assert meta.is_full
    assert meta.hide_pricing is False
    assert meta.information_blocks == []


def test_report_meta_default_date_is_long_form():
    date = ReportMeta().date
    month, day, year = date.replace(",", "").split(" ")
    assert month[0].isupper() and day.isdigit() and len(year) == 4


def test_summary_report_type():
    meta = ReportMeta.model_validate({"reportType": "summary", "startNumber": 4})
    assert not meta.is_full
    assert meta.start_number == 4


def test_section_ref_union():
    embedded = InformationBlock.model_validate({"sectionRef": {"_id": "s1", "name": "Roof"}})
    assert isinstance(embedded.section_ref, EmbeddedSection)
    assert embedded.section_ref.id == "s1"
    assert embedded.section_name == "Roof"

    reference = InformationBlock.model_validate({"section_id": 42})
    assert isinstance(reference.section_ref, SectionReference)
    assert reference.section_ref.id == "42"
    assert reference.section_name is None


def test_information_block_items_images_and_answers():
    block = InformationBlock.model_validate(
        {
            "sectionRef": {"name": "Roof"},
            "selectedChecklistIds": [
                {"_id": "b", "text": "Material: Asphalt", "type": "status", "orderIndex": 2},
                {"_id": "c", "text": "No index"},
                {"_id": "a", "text": "Covering", "type": "information", "orderIndex": 1},
            ],
            "images": [
                {"url": "one.jpg", "checklistId": "a", "location": "North slope"},
                {"url": "two.jpg", "checklistId": "zzz"},
            ],
            "selectedAnswers": [{"checklistId": "a", "selectedAnswers": ["Shingle", "Metal"]}],
        }
    )

    items = block.ordered_items()
    assert [item.id for item in items] == ["a", "b", "c"]
    assert items[1].is_status
    assert items[1].status_parts == ("Material", "Asphalt")
    assert [img.url for img in block.images_for(items[0])] == ["one.jpg"]
    assert block.answers_for(items[0]) == ["Shingle", "Metal"]
    assert block.answers_for(items[2]) == []
    assert block.has_content


def test_empty_block_has_no_content():
    block = InformationBlock.model_validate({"sectionRef": {"name": "Roof"}, "customText": ""})
    assert not block.has_content
