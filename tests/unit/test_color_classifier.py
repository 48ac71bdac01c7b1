import pytest

from inspection_report_builder.models.defect import DEFAULT_DEFECT_COLOR, Severity
from inspection_report_builder.processing.color_classifier import (
    classify_color,
    nearest_severity,
    parse_color,
)


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#dc2626", Severity.IMMEDIATE_ATTENTION),
        ("#f59e0b", Severity.ITEMS_FOR_REPAIR),
        ("#3b82f6", Severity.MAINTENANCE_ITEMS),
        ("#7c3aed", Severity.FURTHER_EVALUATION),
    ],
)
def test_reference_colors_map_to_their_category(color, expected):
    assert classify_color(color) == expected


def test_labels_are_display_strings():
    assert classify_color("#f59e0b").label == "Items for Repair"
    assert Severity.FURTHER_EVALUATION.value == "Further Evaluation"


@pytest.mark.parametrize("color", [None, "", "purple", "#12", "#gggggg", "hsl(0, 100%, 50%)"])
def test_unparseable_colors_fall_back_to_immediate_attention(color):
    assert classify_color(color) == Severity.IMMEDIATE_ATTENTION


def test_default_defect_color_is_immediate_attention():
    assert classify_color(DEFAULT_DEFECT_COLOR) == Severity.IMMEDIATE_ATTENTION


def test_parse_short_hex_and_case_insensitive():
    assert parse_color("#F90") == (255, 153, 0)
    assert parse_color("  #3B82F6  ") == (59, 130, 246)


def test_parse_rgb_and_rgba_with_whitespace():
    assert parse_color("rgb(59, 130, 246)") == (59, 130, 246)
    assert parse_color("RGBA( 124 ,58, 237, 0.5)") == (124, 58, 237)


def test_parse_clamps_channels():
    assert parse_color("rgb(300, 0, 999)") == (255, 0, 255)


def test_nearby_shades_snap_to_nearest_reference():
    assert classify_color("#2563eb") == Severity.MAINTENANCE_ITEMS
    assert classify_color("rgb(250, 160, 20)") == Severity.ITEMS_FOR_REPAIR
    assert classify_color("#800080") == Severity.FURTHER_EVALUATION


def test_exact_reference_distance_is_zero_and_wins():
    assert nearest_severity((220, 38, 38)) == Severity.IMMEDIATE_ATTENTION
