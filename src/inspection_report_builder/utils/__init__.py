"""Utility modules for logging, exceptions, and formatting."""

from .logger import setup_logging, get_logger
from .exceptions import (
    ProcessingError,
    InvalidInputError,
    AssetResolutionError,
    ReportGenerationError,
)
from .formatting import format_currency, format_number, format_long_date

__all__ = [
    "setup_logging",
    "get_logger",
    "ProcessingError",
    "InvalidInputError",
    "AssetResolutionError",
    "ReportGenerationError",
    "format_currency",
    "format_number",
    "format_long_date",
]
