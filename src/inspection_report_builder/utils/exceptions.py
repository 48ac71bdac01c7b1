"""Custom exception classes for error handling."""


class ProcessingError(Exception):
    """Base exception for all report compilation errors."""

    pass


class InvalidInputError(ProcessingError):
    """Defect or report metadata input is not structurally valid."""

    pass


class AssetResolutionError(ProcessingError):
    """A local asset could not be read or encoded."""

    pass


class ReportGenerationError(ProcessingError):
    """Error during report generation."""

    pass
