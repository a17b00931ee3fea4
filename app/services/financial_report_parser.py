"""
Financial Report Parser Service
app/services/financial_report_parser.py

PDF bytes -> text -> pages -> nested field map. The only entry point the HTTP
layer needs. Extraction shortfalls come back as zeros or missing sections;
only a document that cannot be read raises (DocumentLoadError).
"""

from typing import Any, Dict, List, Optional, Sequence

import structlog

from app.config import Settings
from app.extraction.field_map import DEFAULT_MAX_WORKERS, FieldMapBuilder
from app.extraction.fields import ExtractionMode
from app.extraction.pages import DEFAULT_PAGE_MARKER, split_pages
from app.extraction.schema import SectionGroup
from app.pipelines.pdf_parser import PDFTextLoader

logger = structlog.get_logger(__name__)


class FinancialReportParser:
    """Extract the configured line items from an annual report."""

    def __init__(
        self,
        schema: Optional[Sequence[SectionGroup]] = None,
        page_marker: str = DEFAULT_PAGE_MARKER,
        max_workers: int = DEFAULT_MAX_WORKERS,
        line_mode: ExtractionMode = ExtractionMode.DEFENSIVE,
        loader: Optional[PDFTextLoader] = None,
    ):
        self.page_marker = page_marker
        self.builder = FieldMapBuilder(schema, max_workers=max_workers, line_mode=line_mode)
        self.loader = loader or PDFTextLoader()

    @classmethod
    def from_settings(cls, settings: Settings) -> "FinancialReportParser":
        return cls(
            page_marker=settings.PAGE_BOUNDARY_MARKER,
            max_workers=settings.EXTRACTION_MAX_WORKERS,
            line_mode=settings.LINE_EXTRACTION_MODE,
        )

    def split(self, text: str) -> List[str]:
        return split_pages(text, self.page_marker)

    def parse_text(self, text: str) -> Dict[str, Any]:
        """Extract the field map from already-extracted document text."""
        pages = self.split(text)
        data = self.builder.build(pages)
        logger.info("report_parsed", page_count=len(pages), sections=len(data))
        return data

    def parse_pdf(self, data: bytes, filename: Optional[str] = None) -> Dict[str, Any]:
        """
        Extract the field map from PDF bytes.

        Raises:
            DocumentLoadError: if the PDF cannot be read.
        """
        text = self.loader.load_text(data, filename=filename)
        logger.info("pdf_text_extracted", filename=filename, characters=len(text))
        return self.parse_text(text)
