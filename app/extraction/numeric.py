"""
Numeric Token Parsing
app/extraction/numeric.py

Turns a single text token from a report line into a signed float, following
accounting conventions:
    "383,285"   ->  383285.0
    "(1,234)"   -> -1234.0     (parentheses mean negative)
    "N/A", ""   ->  0.0        (never raises)

Also defines FieldResult, the tagged outcome every extractor produces. The
distinction between found / not_found / malformed is kept internally and only
collapsed to a bare float (0.0 for misses) at serialization time.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

# Whole-token patterns used when scanning a line for its first value
PLAIN_NUMBER = re.compile(r"-?[0-9]+(,[0-9]{3})*(\.[0-9]+)?")
PAREN_TOKEN = re.compile(r"\(.*?\)")
FOOTNOTE_MARKER = re.compile(r"\([0-9]+\)")

THOUSANDS_SEPARATOR = ","

# ASCII decimal only; float() alone also takes "1_000", "nan" and "１２３"
DECIMAL_LITERAL = re.compile(r"-?[0-9]+(\.[0-9]+)?")


# ---------------------------------------------------------------------------
# Tagged outcomes
# ---------------------------------------------------------------------------

class FieldStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FieldResult:
    """Outcome of extracting one field."""
    status: FieldStatus
    value: float = 0.0
    token: Optional[str] = None     # raw token that produced the value (or failed to)

    @classmethod
    def found(cls, value: float, token: Optional[str] = None) -> "FieldResult":
        return cls(FieldStatus.FOUND, value, token)

    @classmethod
    def not_found(cls) -> "FieldResult":
        return cls(FieldStatus.NOT_FOUND)

    @classmethod
    def malformed(cls, token: str) -> "FieldResult":
        return cls(FieldStatus.MALFORMED, 0.0, token)

    @property
    def is_found(self) -> bool:
        return self.status is FieldStatus.FOUND

    def to_value(self) -> float:
        """Collapse to the serialized float; anything but FOUND becomes 0.0."""
        return self.value if self.status is FieldStatus.FOUND else 0.0


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def is_qualifying_token(token: str, allow_parentheses: bool = True) -> bool:
    """True if token looks like a line-item value (plain or parenthesized)."""
    if PLAIN_NUMBER.fullmatch(token):
        return True
    return allow_parentheses and PAREN_TOKEN.fullmatch(token) is not None


def classify_numeric_token(token: str) -> FieldResult:
    """Parse a token into a tagged FieldResult (FOUND or MALFORMED)."""
    text = token
    if text.startswith("(") and text.endswith(")"):
        text = "-" + text[1:-1]
    text = text.replace(THOUSANDS_SEPARATOR, "")
    if not DECIMAL_LITERAL.fullmatch(text):
        logger.warning("numeric_parse_failed", token=token)
        return FieldResult.malformed(token)
    return FieldResult.found(float(text), token)


def parse_numeric_token(token: str) -> float:
    """
    Canonicalize a token into a signed float.

    Args:
        token: A whitespace-delimited token, e.g. "62,611" or "(2,227)".

    Returns:
        The parsed value, or 0.0 if the token cannot be parsed.
    """
    return classify_numeric_token(token).to_value()
