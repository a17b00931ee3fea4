"""
Extraction Schema
app/extraction/schema.py

A schema is a list of SectionGroups. Each group names the output key, the
anchor text that identifies its page, the field rules to apply on that page,
and optional nested sub-groups:

    SectionGroup(
        name="Assets",
        anchor="CONSOLIDATED BALANCE SHEETS",
        subgroups=[
            SectionGroup(name="Current_Assets", fields=[
                line("Cash_and_Cash_Equivalents", "Cash and cash equivalents"),
            ]),
        ],
    )

Sub-groups without an anchor read the parent's page.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class FieldKind(str, Enum):
    LINE = "line"                 # line extraction, footnote-stripping mode
    LINE_SIMPLE = "line_simple"   # line extraction, label-removing mode
    SEGMENT = "segment"           # segment-scoped regex extraction


@dataclass(frozen=True)
class FieldRule:
    """One output key and how to find its value on the group's page."""
    key: str
    label: str
    kind: FieldKind = FieldKind.LINE
    segment: Optional[str] = None

    def __post_init__(self):
        if not self.key:
            raise ValueError("FieldRule key must not be empty")
        if not self.label:
            raise ValueError(f"FieldRule {self.key!r} has an empty label")
        if self.kind is FieldKind.SEGMENT and not self.segment:
            raise ValueError(f"Segment rule {self.key!r} requires a segment name")


@dataclass
class SectionGroup:
    """A named section: anchor + field rules + nested sub-groups."""
    name: str
    anchor: Optional[str] = None
    fields: List[FieldRule] = field(default_factory=list)
    subgroups: List["SectionGroup"] = field(default_factory=list)

    def __post_init__(self):
        keys = [rule.key for rule in self.fields] + [sub.name for sub in self.subgroups]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Section {self.name!r} has duplicate keys: {duplicates}")

    def anchors(self) -> Iterator[str]:
        """Every anchor used by this group and its sub-groups."""
        if self.anchor:
            yield self.anchor
        for sub in self.subgroups:
            yield from sub.anchors()


def line(key: str, label: str) -> FieldRule:
    return FieldRule(key, label, FieldKind.LINE)


def simple_line(key: str, label: str) -> FieldRule:
    return FieldRule(key, label, FieldKind.LINE_SIMPLE)


def segment(key: str, segment_name: str, label: str) -> FieldRule:
    return FieldRule(key, label, FieldKind.SEGMENT, segment_name)


def validate_schema(groups: List[SectionGroup]) -> None:
    """Top-level groups need an anchor and a unique name."""
    names = [g.name for g in groups]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate section names in schema: {duplicates}")
    for group in groups:
        if not group.anchor:
            raise ValueError(f"Top-level section {group.name!r} requires an anchor")
