"""
Page Splitting & Section Lookup
app/extraction/pages.py

The text extractor hands us one long string. Every page of the 10-K carries
the same running footer ("Apple Inc. | 2023 Form 10-K"), so splitting on that
literal marker recovers logical pages. Sections are then found by anchor text
(e.g. "CONSOLIDATED BALANCE SHEETS"): the first page containing the anchor wins.
"""

from typing import Dict, Iterable, List, Optional, Sequence

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_MARKER = "Apple Inc. | 2023 Form 10-K"


def split_pages(text: str, marker: str = DEFAULT_PAGE_MARKER) -> List[str]:
    """
    Split raw document text into pages on a literal boundary marker.

    Empty segments (e.g. before a leading marker) are kept, so joining the
    result with the marker gives back the original text.

    Raises:
        ValueError: if marker is empty.
    """
    if not marker:
        raise ValueError("Page boundary marker must not be empty")
    pages = text.split(marker)
    logger.debug("pages_split", page_count=len(pages), marker=marker)
    return pages


def locate_section(pages: Sequence[str], anchor: str) -> Optional[str]:
    """Return the first page containing anchor (case-sensitive), or None."""
    for page in pages:
        if anchor in page:
            return page
    return None


class SectionIndex:
    """
    Anchor -> page lookup built once per document.

    Several section groups share anchors (both "Note 9 – Debt" groups, for
    instance); the index scans the pages once per distinct anchor and serves
    every later lookup from the cache. Results match locate_section exactly.
    """

    def __init__(self, pages: Sequence[str]):
        self._pages = tuple(pages)
        self._index: Dict[str, Optional[str]] = {}

    @property
    def pages(self) -> Sequence[str]:
        return self._pages

    def build(self, anchors: Iterable[str]) -> "SectionIndex":
        """Resolve every anchor up front so later lookups are read-only."""
        for anchor in anchors:
            self.locate(anchor)
        located = sum(1 for page in self._index.values() if page is not None)
        logger.info(
            "section_index_built",
            anchors=len(self._index),
            located=located,
            page_count=len(self._pages),
        )
        return self

    def locate(self, anchor: str) -> Optional[str]:
        if anchor not in self._index:
            self._index[anchor] = locate_section(self._pages, anchor)
        return self._index[anchor]

    def __contains__(self, anchor: str) -> bool:
        return self.locate(anchor) is not None
