"""
Field Map Builder
app/extraction/field_map.py

Runs every section group of a schema against a document's pages and merges
the outputs into one nested mapping:

    pages ──► SectionIndex (anchor -> page, built once)
                  │
                  ├──► group 1 ──► SectionResult ─┐
                  ├──► group 2 ──► SectionResult ─┤──► merge by name ──► dict
                  └──► group N ──► None (absent) ─┘

Groups run on a thread pool. Each task owns its SectionResult; nothing is
written to a shared mapping until every task has finished.

Output rules:
  - anchor not located      -> the group's key is omitted
  - anchor located          -> every field is present, 0.0 when not found
  - a task raising an error -> logged, that group omitted, all others kept
"""

from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import structlog

from app.extraction.annual_report_schema import ANNUAL_REPORT_SCHEMA
from app.extraction.fields import ExtractionMode, find_line_field, find_segment_field
from app.extraction.numeric import FieldResult, FieldStatus
from app.extraction.pages import SectionIndex
from app.extraction.schema import FieldKind, FieldRule, SectionGroup, validate_schema

logger = structlog.get_logger(__name__)

DEFAULT_MAX_WORKERS = 8


@dataclass
class SectionResult:
    """Tagged extraction outcome for one located section group."""
    name: str
    anchor: Optional[str]
    fields: Dict[str, FieldResult] = field(default_factory=dict)
    subsections: Dict[str, "SectionResult"] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Collapse to the serialized form: floats and nested dicts only."""
        data: Dict[str, Any] = {key: result.to_value() for key, result in self.fields.items()}
        for name, sub in self.subsections.items():
            data[name] = sub.to_dict()
        return data

    def count(self, status: FieldStatus) -> int:
        own = sum(1 for result in self.fields.values() if result.status is status)
        return own + sum(sub.count(status) for sub in self.subsections.values())

    def unresolved_fields(self, prefix: str = "") -> List[str]:
        """Dotted paths of fields that were not found or failed to parse."""
        path = f"{prefix}{self.name}"
        missing = [
            f"{path}.{key}" for key, result in self.fields.items() if not result.is_found
        ]
        for sub in self.subsections.values():
            missing.extend(sub.unresolved_fields(prefix=f"{path}."))
        return missing


def extract_field(
    page: str,
    rule: FieldRule,
    line_mode: ExtractionMode = ExtractionMode.DEFENSIVE,
) -> FieldResult:
    """Apply one field rule to a page. line_mode applies to LINE rules only."""
    if rule.kind is FieldKind.SEGMENT:
        return find_segment_field(page, rule.segment, rule.label)
    if rule.kind is FieldKind.LINE_SIMPLE:
        return find_line_field(page, rule.label, ExtractionMode.SIMPLE)
    return find_line_field(page, rule.label, line_mode)


def extract_group(
    index: SectionIndex,
    group: SectionGroup,
    parent_page: Optional[str] = None,
    line_mode: ExtractionMode = ExtractionMode.DEFENSIVE,
) -> Optional[SectionResult]:
    """
    Extract one section group (and its sub-groups).

    Returns None when the group's anchor is not on any page. A group without
    an anchor reads parent_page.
    """
    if group.anchor:
        page = index.locate(group.anchor)
        if page is None:
            logger.info("section_not_located", section=group.name, anchor=group.anchor)
            return None
    else:
        page = parent_page
        if page is None:
            return None

    result = SectionResult(name=group.name, anchor=group.anchor)
    for rule in group.fields:
        outcome = extract_field(page, rule, line_mode)
        if not outcome.is_found:
            logger.debug(
                "field_unresolved",
                section=group.name,
                key=rule.key,
                label=rule.label,
                status=outcome.status.value,
            )
        result.fields[rule.key] = outcome

    for sub in group.subgroups:
        sub_result = extract_group(index, sub, page, line_mode)
        if sub_result is not None:
            result.subsections[sub.name] = sub_result
    return result


class FieldMapBuilder:
    """Build the nested result mapping for a document from a section schema."""

    def __init__(
        self,
        schema: Optional[Sequence[SectionGroup]] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        line_mode: ExtractionMode = ExtractionMode.DEFENSIVE,
    ):
        self.schema: List[SectionGroup] = list(schema if schema is not None else ANNUAL_REPORT_SCHEMA)
        validate_schema(self.schema)
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers
        self.line_mode = line_mode

    def build_results(self, pages: Sequence[str]) -> Dict[str, SectionResult]:
        """Run every group concurrently and merge the located ones by name."""
        index = SectionIndex(pages).build(
            anchor for group in self.schema for anchor in group.anchors()
        )

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {
                pool.submit(extract_group, index, group, None, self.line_mode): group
                for group in self.schema
            }
            wait(futures)

        results: Dict[str, SectionResult] = {}
        for future, group in futures.items():
            try:
                section = future.result()
            except Exception as e:
                logger.error("section_extraction_failed", section=group.name, error=str(e))
                continue
            if section is not None:
                results[group.name] = section

        logger.info(
            "field_map_built",
            sections_configured=len(self.schema),
            sections_located=len(results),
            fields_found=sum(r.count(FieldStatus.FOUND) for r in results.values()),
            fields_not_found=sum(r.count(FieldStatus.NOT_FOUND) for r in results.values()),
            fields_malformed=sum(r.count(FieldStatus.MALFORMED) for r in results.values()),
        )
        return results

    def build(self, pages: Sequence[str]) -> Dict[str, Any]:
        """Return the serialized ResultMapping (floats and nested dicts)."""
        return {name: section.to_dict() for name, section in self.build_results(pages).items()}


def build_field_map(
    pages: Sequence[str],
    schema: Optional[Sequence[SectionGroup]] = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Dict[str, Any]:
    """Shortcut for FieldMapBuilder(schema, max_workers).build(pages)."""
    return FieldMapBuilder(schema, max_workers).build(pages)
