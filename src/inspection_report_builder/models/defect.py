"""Data models for defect findings and their derived text and severity."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationInfo, field_validator

from .base import WireModel

DEFAULT_DEFECT_COLOR = "#d63636"
DEFAULT_LOCATION = "Not specified"
DEFAULT_LABOR_TYPE = "N/A"
DEFAULT_RECOMMENDATION = "N/A"

# Text fields where an empty string means "use the default"
_TEXT_DEFAULTS = {
    "location": DEFAULT_LOCATION,
    "labor_type": DEFAULT_LABOR_TYPE,
    "recommendation": DEFAULT_RECOMMENDATION,
    "color": DEFAULT_DEFECT_COLOR,
}


class Severity(str, Enum):
    """Severity categories, derived from a defect's color."""

    IMMEDIATE_ATTENTION = "Immediate Attention"
    ITEMS_FOR_REPAIR = "Items for Repair"
    MAINTENANCE_ITEMS = "Maintenance Items"
    FURTHER_EVALUATION = "Further Evaluation"

    @property
    def label(self) -> str:
        return self.value


class AdditionalImage(WireModel):
    """Extra location photo attached to a defect."""

    url: str
    location: str | None = None


class DefectItem(WireModel):
    """Single inspection finding with location, cost, and severity metadata."""

    section: str = Field(default="", description="Primary grouping label")
    subsection: str = Field(default="", description="Secondary grouping label")
    description: str = Field(
        default="",
        validation_alias=AliasChoices("description", "defectDescription", "defect_description"),
        description="Raw multi-line narrative",
    )
    image: str | None = Field(default=None, description="Image URL or data URI")
    location: str = DEFAULT_LOCATION
    material_cost: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "materialCost", "material_cost", "materialTotalCost", "material_total_cost"
        ),
    )
    labor_type: str = DEFAULT_LABOR_TYPE
    labor_rate: float = Field(default=0.0, description="Currency per hour")
    hours_required: float = 0.0
    recommendation: str = DEFAULT_RECOMMENDATION
    color: str = Field(default=DEFAULT_DEFECT_COLOR, description="CSS color expression")
    additional_images: list[AdditionalImage] = Field(default_factory=list)

    @field_validator("location", "labor_type", "recommendation", "color", mode="before")
    @classmethod
    def _blank_text_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and not value.strip():
            return _TEXT_DEFAULTS[info.field_name]
        return value

    @property
    def labor_cost(self) -> float:
        return self.labor_rate * self.hours_required

    @property
    def total_cost(self) -> float:
        """Materials plus labor rate times hours."""
        return self.material_cost + self.labor_cost

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.section, self.subsection)


class DefectText(BaseModel):
    """Defect narrative split into a title and body paragraphs."""

    title: str = ""
    body: str = ""
    paragraphs: list[str] = Field(default_factory=list)

    @property
    def has_body(self) -> bool:
        return bool(self.paragraphs)
