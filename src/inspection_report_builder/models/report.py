"""Data models for report configuration and the computed report layout."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..utils.formatting import format_long_date
from .base import WireModel
from .defect import DefectItem, DefectText, Severity
from .information import InformationBlock

DEFAULT_REPORT_TITLE = "Inspection Report"
DEFAULT_REPORT_SUBTITLE = "Defect Summary and Details"


class ReportType(str, Enum):
    """Output modes of the report."""

    FULL = "full"
    SUMMARY = "summary"


class ReportMeta(WireModel):
    """Render configuration for one report."""

    title: str = DEFAULT_REPORT_TITLE
    subtitle: str = DEFAULT_REPORT_SUBTITLE
    company: str = ""
    logo_url: str | None = Field(default=None, description="Logo URL, local path, or data URI")
    header_image_url: str | None = Field(default=None, description="Large header image")
    header_text: str | None = None
    date: str = Field(default_factory=lambda: format_long_date(), description="Display date")
    start_number: int = Field(default=1, description="Base section number")
    report_type: ReportType = ReportType.FULL
    information_blocks: list[InformationBlock] = Field(default_factory=list)
    hide_pricing: bool = False

    @property
    def is_full(self) -> bool:
        return self.report_type == ReportType.FULL


class SectionNumber(BaseModel):
    """Hierarchical ``main.sub`` number of one defect."""

    model_config = ConfigDict(frozen=True)

    main: int
    sub: int

    def __str__(self) -> str:
        return f"{self.main}.{self.sub}"


class DefectEntry(BaseModel):
    """One defect with everything the detail, summary, and cost passes need."""

    defect: DefectItem
    number: SectionNumber
    text: DefectText
    severity: Severity
    is_new_section: bool = False
    information_block: InformationBlock | None = None
    page_break_after: bool = False

    @property
    def label(self) -> str:
        return str(self.number)

    @property
    def summary_title(self) -> str:
        """Short defect name used in the summary and cost tables."""
        return self.text.title or self.defect.description.split(".")[0]


class InformationSection(BaseModel):
    """Information block rendered under its own heading because no defect claims it."""

    number: int
    name: str
    block: InformationBlock


class CostLineItem(BaseModel):
    """Single row of the itemized cost table."""

    number: str
    title: str
    cost: float


class CostSummary(BaseModel):
    """Itemized costs with grand total."""

    line_items: list[CostLineItem] = Field(default_factory=list)
    total: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for export."""
        return {
            "line_items": [item.model_dump() for item in self.line_items],
            "total": round(self.total, 2),
        }
