"""Itemized cost aggregation for the total-cost table."""

from typing import Sequence

from ..models.report import CostLineItem, CostSummary, DefectEntry
from ..utils.logger import get_logger

logger = get_logger(__name__)


def calculate_cost_summary(entries: Sequence[DefectEntry]) -> CostSummary:
    """
    Calculate per-defect costs and the grand total.

    Args:
        entries: Numbered defects in report order

    Returns:
        CostSummary with one line per defect
    """
    line_items = [
        CostLineItem(
            number=entry.label,
            title=entry.summary_title,
            cost=entry.defect.total_cost,
        )
        for entry in entries
    ]
    total = sum(item.cost for item in line_items)

    logger.debug(f"Cost summary: {len(line_items)} items, total {total:.2f}")
    return CostSummary(line_items=line_items, total=total)
