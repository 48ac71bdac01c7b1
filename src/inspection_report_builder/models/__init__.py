"""Data models for the inspection report builder."""

from .defect import Severity, AdditionalImage, DefectItem, DefectText
from .information import (
    InformationItemType,
    EmbeddedSection,
    SectionReference,
    InformationBlockItem,
    InformationBlockImage,
    ChecklistAnswers,
    InformationBlock,
)
from .report import (
    ReportType,
    ReportMeta,
    SectionNumber,
    DefectEntry,
    InformationSection,
    CostLineItem,
    CostSummary,
)

__all__ = [
    "Severity",
    "AdditionalImage",
    "DefectItem",
    "DefectText",
    "InformationItemType",
    "EmbeddedSection",
    "SectionReference",
    "InformationBlockItem",
    "InformationBlockImage",
    "ChecklistAnswers",
    "InformationBlock",
    "ReportType",
    "ReportMeta",
    "SectionNumber",
    "DefectEntry",
    "InformationSection",
    "CostLineItem",
    "CostSummary",
]
