"""Report generation modules for HTML and cost summaries."""

from .builder import ReportBuilder, generate_inspection_report_html
from .cost_summary import calculate_cost_summary

__all__ = [
    "ReportBuilder",
    "generate_inspection_report_html",
    "calculate_cost_summary",
]
