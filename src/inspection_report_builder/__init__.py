"""Compile property inspection defects into a self-contained HTML report."""

from .models import DefectItem, InformationBlock, ReportMeta, ReportType, Severity
from .report import ReportBuilder, generate_inspection_report_html
from .utils import setup_logging
from .utils.exceptions import (
    ProcessingError,
    InvalidInputError,
    AssetResolutionError,
    ReportGenerationError,
)

__version__ = "0.1.0"

__all__ = [
    "generate_inspection_report_html",
    "ReportBuilder",
    "DefectItem",
    "InformationBlock",
    "ReportMeta",
    "ReportType",
    "Severity",
    "setup_logging",
    "ProcessingError",
    "InvalidInputError",
    "AssetResolutionError",
    "ReportGenerationError",
]
