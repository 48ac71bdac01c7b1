"""Constants and configuration values."""

from ..models.defect import Severity

# Reference colors for severity classification, in tie-break order
REFERENCE_COLORS = {
    Severity.IMMEDIATE_ATTENTION: (220, 38, 38),  # #dc2626
    Severity.ITEMS_FOR_REPAIR: (245, 158, 11),  # #f59e0b
    Severity.MAINTENANCE_ITEMS: (59, 130, 246),  # #3b82f6
    Severity.FURTHER_EVALUATION: (124, 58, 237),  # #7c3aed
}

FALLBACK_SEVERITY = Severity.IMMEDIATE_ATTENTION

# CSS modifier used for each category in the legal scope section
SEVERITY_CSS_CLASSES = {
    Severity.IMMEDIATE_ATTENTION: "cat-red",
    Severity.ITEMS_FOR_REPAIR: "cat-orange",
    Severity.MAINTENANCE_ITEMS: "cat-blue",
    Severity.FURTHER_EVALUATION: "cat-purple",
}

# Leading "<digits> - " on section names, e.g. "9 - Roof"
SECTION_PREFIX_PATTERN = r"^\d+\s*-\s*"

# Segmenter label bounds for "Label: remainder" and "Label - remainder"
TITLE_LABEL_MIN_CHARS = 3
TITLE_LABEL_MAX_CHARS = 120

# Page break after every N rendered defects
DEFECTS_PER_PAGE = 2

# Mime types for inlined local assets, keyed by lowercase extension
ASSET_MIME_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
}
DEFAULT_ASSET_MIME_TYPE = "image/jpeg"

# Category explanations shown in the scope & limitations section
SEVERITY_DESCRIPTIONS = {
    Severity.IMMEDIATE_ATTENTION: (
        "Major Defects: Issues that compromise the home’s structural integrity, may result in "
        "additional damage if not repaired, or are considered a safety hazard. These items are "
        "color-coded red in the report and should be corrected as soon as possible."
    ),
    Severity.ITEMS_FOR_REPAIR: (
        "Defects: Items in need of repair or correction, such as plumbing or electrical concerns, "
        "damaged or improperly installed components, etc. These are color-coded orange in the "
        "report and have no strict repair timeline."
    ),
    Severity.MAINTENANCE_ITEMS: (
        "Small DIY-type repairs and maintenance recommendations provided to increase knowledge of "
        "long-term care. While not urgent, addressing these will reduce future repair needs and costs."
    ),
    Severity.FURTHER_EVALUATION: (
        "In some cases, a defect falls outside the scope of a general home inspection or requires "
        "a more extensive level of knowledge to determine the full extent of the issue. These items "
        "should be further evaluated by a specialist."
    ),
}
