"""Main report builder orchestrating HTML generation."""

from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from markupsafe import Markup
from pydantic import ValidationError

from ..config import settings as default_settings
from ..config.constants import DEFECTS_PER_PAGE, SEVERITY_CSS_CLASSES, SEVERITY_DESCRIPTIONS
from ..config.settings import Settings
from ..io.asset_resolver import inline_local_asset
from ..models.defect import DefectItem, Severity
from ..models.report import DefectEntry, InformationSection, ReportMeta
from ..processing.color_classifier import classify_color
from ..processing.information_matcher import (
    find_information_block,
    find_information_only_sections,
)
from ..processing.numbering import assign_section_numbers, section_starts, sort_defects
from ..processing.text_segmenter import segment_defect_text
from ..utils.exceptions import InvalidInputError, ReportGenerationError
from ..utils.logger import get_logger
from .cost_summary import calculate_cost_summary
from .templates import STYLESHEET, create_environment

logger = get_logger(__name__)

_environment = create_environment()


class ReportBuilder:
    """Orchestrates inspection report HTML generation."""

    def __init__(
        self,
        defects: Sequence[DefectItem],
        meta: ReportMeta,
        settings: Settings = None,
    ):
        """
        Initialize report builder.

        Args:
            defects: Defect findings in any order
            meta: Report configuration
            settings: Branding and asset settings (defaults to environment settings)
        """
        self.meta = meta
        self.settings = settings or default_settings

        self.defects = sort_defects(defects)
        self.entries = self._build_entries()
        self.information_sections = self._find_information_sections()
        self.cost_summary = calculate_cost_summary(self.entries)

        logger.info(
            f"Initialized report builder: {len(self.entries)} defects, "
            f"{len(self.meta.information_blocks)} information blocks, "
            f"type={self.meta.report_type.value}"
        )

    def _build_entries(self) -> list[DefectEntry]:
        """Number, segment, classify, and paginate the sorted defects once."""
        numbers = assign_section_numbers(self.defects, self.meta.start_number)
        starts = section_starts(self.defects)
        count = len(self.defects)

        entries = []
        for index, (defect, number, is_start) in enumerate(zip(self.defects, numbers, starts)):
            block = None
            if is_start:
                block = find_information_block(defect.section, self.meta.information_blocks)
            entries.append(
                DefectEntry(
                    defect=defect,
                    number=number,
                    text=segment_defect_text(defect.description),
                    severity=classify_color(defect.color),
                    is_new_section=is_start,
                    information_block=block,
                    page_break_after=(index + 1) % DEFECTS_PER_PAGE == 0 and index < count - 1,
                )
            )
        return entries

    def _find_information_sections(self) -> list[InformationSection]:
        if not self.meta.is_full:
            return []
        last_main = self.entries[-1].number.main if self.entries else self.meta.start_number
        return find_information_only_sections(
            self.defects, self.meta.information_blocks, last_main
        )

    def _logo_src(self) -> str | None:
        # Only the branded header and a traditional header with a logo show one
        if not (self.meta.header_image_url or self.meta.logo_url):
            return None
        return inline_local_asset(
            self.meta.logo_url,
            self.settings.default_logo_path,
            self.settings.asset_root,
        )

    def _template_context(self) -> dict:
        return {
            "meta": self.meta,
            "settings": self.settings,
            "entries": self.entries,
            "information_sections": self.information_sections,
            "cost_summary": self.cost_summary,
            "logo_src": self._logo_src(),
            "stylesheet": Markup(STYLESHEET),
            "severity_guide": [
                (severity, SEVERITY_CSS_CLASSES[severity], SEVERITY_DESCRIPTIONS[severity])
                for severity in Severity
            ],
        }

    def generate_html(self) -> str:
        """
        Render the complete report document.

        Returns:
            Self-contained HTML string

        Raises:
            ReportGenerationError: If template rendering fails
        """
        logger.info(f"Generating HTML report: {self.meta.title}")

        try:
            template = _environment.get_template("report.html")
            html = template.render(**self._template_context())
        except Exception as e:
            error_msg = f"Failed to generate HTML: {e}"
            logger.error(error_msg)
            raise ReportGenerationError(error_msg) from e

        logger.info(f"Generated HTML report: {len(html) / 1_000:.1f} KB")
        return html

    def write_html(self, output_path: Path) -> Path:
        """
        Render the report and save it to disk.

        Args:
            output_path: Path where the .html file should be saved

        Returns:
            Path to the written file
        """
        html = self.generate_html()
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)
        logger.info(f"Wrote HTML report: {output_path}")
        return output_path


def _load_defects(defects: Iterable[DefectItem | Mapping[str, Any]]) -> list[DefectItem]:
    return [
        defect if isinstance(defect, DefectItem) else DefectItem.model_validate(defect)
        for defect in defects
    ]


def _load_meta(meta: ReportMeta | Mapping[str, Any] | None) -> ReportMeta:
    if meta is None:
        return ReportMeta()
    if isinstance(meta, ReportMeta):
        return meta
    return ReportMeta.model_validate(meta)


def generate_inspection_report_html(
    defects: Iterable[DefectItem | Mapping[str, Any]],
    meta: ReportMeta | Mapping[str, Any] | None = None,
    settings: Settings = None,
) -> str:
    """
    Compile defect findings into one self-contained HTML inspection report.

    Accepts validated models or raw dictionaries using camelCase or
    snake_case keys.

    Args:
        defects: Defect findings in any order
        meta: Report configuration (defaults apply when omitted)
        settings: Branding and asset settings override

    Returns:
        HTML document string

    Raises:
        InvalidInputError: If the input is not structurally valid
        ReportGenerationError: If rendering fails
    """
    try:
        defect_items = _load_defects(defects)
        report_meta = _load_meta(meta)
    except ValidationError as e:
        error_msg = f"Invalid report input: {e.error_count()} validation error(s)"
        logger.error(error_msg)
        raise InvalidInputError(error_msg) from e

    return ReportBuilder(defect_items, report_meta, settings=settings).generate_html()
