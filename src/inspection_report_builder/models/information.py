"""Data models for section-scoped information blocks."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, Field, field_validator

from .base import WireModel

_ID_ALIASES = AliasChoices("id", "_id")


class InformationItemType(str, Enum):
    """How a checklist item is rendered inside an information block."""

    STATUS = "status"
    INFORMATION = "information"


class EmbeddedSection(WireModel):
    """Section record embedded in the block payload."""

    kind: Literal["embedded"] = "embedded"
    id: str | None = Field(default=None, validation_alias=_ID_ALIASES)
    name: str = ""
    order_index: int | None = None


class SectionReference(WireModel):
    """Bare section identifier. Never matches a defect section."""

    kind: Literal["reference"] = "reference"
    id: str


SectionRef = Annotated[Union[EmbeddedSection, SectionReference], Field(discriminator="kind")]


class InformationBlockItem(WireModel):
    """Checklist item selected into an information block."""

    id: str | None = Field(default=None, validation_alias=_ID_ALIASES)
    text: str = ""
    comment: str | None = None
    type: InformationItemType = InformationItemType.INFORMATION
    order_index: int | None = None

    @property
    def is_status(self) -> bool:
        return self.type == InformationItemType.STATUS

    @property
    def status_parts(self) -> tuple[str, str]:
        """Split ``"Label: value"`` on the first colon."""
        label, _, value = self.text.partition(":")
        return label.strip(), value.strip()


class InformationBlockImage(WireModel):
    """Photo attached to an information block, optionally tied to one item."""

    url: str
    annotations: str | None = None
    checklist_id: str | None = None
    location: str | None = None


class ChecklistAnswers(WireModel):
    """Answer choices picked for one checklist item."""

    checklist_id: str
    selected_answers: list[str] = Field(default_factory=list)


class InformationBlock(WireModel):
    """Supplemental content for one report section, authored apart from defects."""

    id: str | None = Field(default=None, validation_alias=_ID_ALIASES)
    section_ref: SectionRef = Field(
        validation_alias=AliasChoices("sectionRef", "section_ref", "sectionId", "section_id")
    )
    selected_checklist_items: list[InformationBlockItem] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "selectedChecklistItems",
            "selected_checklist_items",
            "selectedChecklistIds",
            "selected_checklist_ids",
        ),
    )
    custom_text: str | None = None
    images: list[InformationBlockImage] = Field(default_factory=list)
    selected_answers: list[ChecklistAnswers] = Field(default_factory=list)

    @field_validator("section_ref", mode="before")
    @classmethod
    def _tag_section_ref(cls, value: Any) -> Any:
        if isinstance(value, (str, int)):
            return {"kind": "reference", "id": str(value)}
        if isinstance(value, dict) and "kind" not in value:
            return {**value, "kind": "embedded"}
        return value

    @property
    def section_name(self) -> str | None:
        """Name of the embedded section, or None for a bare reference."""
        if isinstance(self.section_ref, EmbeddedSection):
            return self.section_ref.name
        return None

    @property
    def has_content(self) -> bool:
        return bool(self.selected_checklist_items or self.custom_text)

    def ordered_items(self) -> list[InformationBlockItem]:
        """Items by ``order_index``; items without one keep input order at the end."""
        return sorted(
            self.selected_checklist_items,
            key=lambda item: (item.order_index is None, item.order_index or 0),
        )

    def images_for(self, item: InformationBlockItem) -> list[InformationBlockImage]:
        if not item.id:
            return []
        return [image for image in self.images if image.checklist_id == item.id]

    def answers_for(self, item: InformationBlockItem) -> list[str]:
        if not item.id:
            return []
        for answers in self.selected_answers:
            if answers.checklist_id == item.id:
                return answers.selected_answers
        return []
