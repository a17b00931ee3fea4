"""
Field Extractors
app/extraction/fields.py

Two ways of pulling a value off a located page:

  Line extraction     - find the line containing a label and take the first
                        numeric token on it. The first token is the current
                        fiscal year; the prior-year column is ignored.
                          "Total net sales $ 383,285 $ 394,328"  ->  383285.0

  Segment extraction  - for tables that repeat a label per segment
                        (e.g. "Net sales" under Americas, Europe, ...), match
                        "<segment>: ... <label> $ <number>" so each segment
                        gets its own value.
"""

import re
from enum import Enum

import structlog

from app.extraction.numeric import (
    FOOTNOTE_MARKER,
    PLAIN_NUMBER,
    FieldResult,
    FieldStatus,
    classify_numeric_token,
    is_qualifying_token,
)

logger = structlog.get_logger(__name__)


class ExtractionMode(str, Enum):
    """How a matching line is cleaned before tokenizing."""
    # Strip "(1)"-style footnote markers; accept parenthesized negatives
    DEFENSIVE = "defensive"
    # Remove the label text only; accept plain numbers only
    SIMPLE = "simple"


# ---------------------------------------------------------------------------
# Line extraction
# ---------------------------------------------------------------------------

def _first_value_defensive(line: str) -> FieldResult:
    cleaned = FOOTNOTE_MARKER.sub("", line).strip()
    for token in cleaned.split():
        if is_qualifying_token(token):
            return classify_numeric_token(token)
    return FieldResult.not_found()


def _first_value_simple(line: str, label: str) -> FieldResult:
    cleaned = line.replace(label, "").strip()
    for token in cleaned.split():
        if PLAIN_NUMBER.fullmatch(token):
            return classify_numeric_token(token)
    return FieldResult.not_found()


def find_line_field(
    page_text: str,
    label: str,
    mode: ExtractionMode = ExtractionMode.DEFENSIVE,
) -> FieldResult:
    """
    Scan page lines for label and extract the first qualifying number.

    A line matches when its trimmed text contains label anywhere, so
    "Net income" also matches "Net income per share". Lines are scanned in
    order; a matching line with no usable token (a table header, say) does
    not stop the scan.

    Args:
        page_text: Text of one page.
        label: Literal substring identifying the line.
        mode: DEFENSIVE (default) or SIMPLE cleaning of the matched line.

    Returns:
        FieldResult - FOUND with the value, MALFORMED if the token could not
        be parsed, NOT_FOUND if no matching line carried a number.
    """
    for line in page_text.splitlines():
        if label not in line.strip():
            continue
        logger.debug("field_line_matched", label=label, mode=mode.value)

        if mode is ExtractionMode.SIMPLE:
            result = _first_value_simple(line, label)
        else:
            result = _first_value_defensive(line)

        if result.status is not FieldStatus.NOT_FOUND:
            return result
    return FieldResult.not_found()


def extract_line_field(
    page_text: str,
    label: str,
    mode: ExtractionMode = ExtractionMode.DEFENSIVE,
) -> float:
    """find_line_field collapsed to a float (0.0 when not found)."""
    return find_line_field(page_text, label, mode).to_value()


# ---------------------------------------------------------------------------
# Segment extraction
# ---------------------------------------------------------------------------

def segment_pattern(segment: str, label: str) -> "re.Pattern[str]":
    """Build "<segment>: ...(non-greedy)... <label> $ <number>"."""
    return re.compile(
        re.escape(segment) + r":[\s\S]*?" + re.escape(label) + r"\s*\$\s*([0-9,]+)"
    )


def find_segment_field(page_text: str, segment: str, label: str) -> FieldResult:
    """
    Extract label's dollar amount from within a named segment of the page.

    Segment blocks are headed "<segment>:"; a bare mention of the segment
    name in prose does not start a block. Only the first occurrence of label
    after the header is used.
    """
    match = segment_pattern(segment, label).search(page_text)
    if match is None:
        return FieldResult.not_found()
    return classify_numeric_token(match.group(1))


def extract_segment_field(page_text: str, segment: str, label: str) -> float:
    """find_segment_field collapsed to a float (0.0 when not found)."""
    return find_segment_field(page_text, segment, label).to_value()
