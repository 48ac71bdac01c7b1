"""Split free-form defect narratives into a title and body paragraphs."""

import re
from typing import Callable, Optional

from ..config.constants import TITLE_LABEL_MAX_CHARS, TITLE_LABEL_MIN_CHARS
from ..models.defect import DefectText

_BLANK_LINE_RE = re.compile(r"\n\s*\n")
_COLON_RE = re.compile(
    rf"([^:]{{{TITLE_LABEL_MIN_CHARS},{TITLE_LABEL_MAX_CHARS}}}):\s*(.+)", re.DOTALL
)
_DASH_RE = re.compile(
    rf"([^–-]{{{TITLE_LABEL_MIN_CHARS},{TITLE_LABEL_MAX_CHARS}}})[–-]\s*(.+)", re.DOTALL
)

Rule = Callable[[str], Optional[DefectText]]


def normalize_text(raw: str | None) -> str:
    """Unify line endings and trim."""
    return (raw or "").replace("\r\n", "\n").replace("\r", "\n").strip()


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping empty blocks."""
    return [block.strip() for block in _BLANK_LINE_RE.split(text) if block.strip()]


def _titled_remainder(title: str, remainder: str) -> DefectText:
    remainder = remainder.strip()
    paragraphs = split_paragraphs(remainder) if remainder else []
    if not paragraphs and remainder:
        paragraphs = [remainder]
    return DefectText(title=title.strip(), body=remainder, paragraphs=paragraphs)


def paragraph_blocks_rule(text: str) -> DefectText | None:
    """First blank-line separated block is the title, the rest are paragraphs."""
    blocks = split_paragraphs(text)
    if len(blocks) <= 1:
        return None
    title, *rest = blocks
    return DefectText(title=title, body="\n\n".join(rest).strip(), paragraphs=rest)


def line_blocks_rule(text: str) -> DefectText | None:
    """First line is the title, remaining lines join into one paragraph."""
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if len(lines) <= 1:
        return None
    title, *rest = lines
    combined = " ".join(rest).strip()
    return DefectText(title=title, body=combined, paragraphs=[combined] if combined else [])


def colon_label_rule(text: str) -> DefectText | None:
    """``Label: remainder``"""
    match = _COLON_RE.fullmatch(text)
    if not match:
        return None
    return _titled_remainder(*match.groups())


def dash_label_rule(text: str) -> DefectText | None:
    """``Label - remainder`` or ``Label – remainder``"""
    match = _DASH_RE.fullmatch(text)
    if not match:
        return None
    return _titled_remainder(*match.groups())


def first_period_rule(text: str) -> DefectText | None:
    """Split at the first period unless it is the first or last character."""
    index = text.find(".")
    if not 0 < index < len(text) - 1:
        return None
    return _titled_remainder(text[:index], text[index + 1 :])


def whole_text_rule(text: str) -> DefectText:
    return DefectText(title=text)


# Evaluated in order; the first rule returning a result wins
SEGMENTATION_RULES: tuple[Rule, ...] = (
    paragraph_blocks_rule,
    line_blocks_rule,
    colon_label_rule,
    dash_label_rule,
    first_period_rule,
    whole_text_rule,
)


def segment_defect_text(raw: str | None) -> DefectText:
    """
    Split a defect narrative into title, body, and paragraphs.

    Args:
        raw: Narrative text as typed by the inspector (may be empty)

    Returns:
        DefectText; all fields empty for blank input
    """
    text = normalize_text(raw)
    if not text:
        return DefectText()

    for rule in SEGMENTATION_RULES:
        result = rule(text)
        if result is not None:
            return result

    return whole_text_rule(text)
