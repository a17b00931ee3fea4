"""
PDF Text Loader for Annual Report Filings

Turns an uploaded PDF into one plain-text string for the field extractor.
Page texts are joined with newlines; the running footer that pdfplumber
extracts on every page is what later separates logical pages.

Usage:
    python -m app.pipelines.pdf_parser <path_to_pdf>
"""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import List, Union

import pdfplumber

from app.core.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)
logging.getLogger("pdfminer").setLevel(logging.ERROR)


class PDFTextLoader:
    """Extract the raw text of a PDF with pdfplumber."""

    def load_text(self, source: Union[bytes, str, Path], filename: str = None) -> str:
        """
        Extract text from every page of a PDF.

        Args:
            source: PDF bytes, or a path to a PDF file
            filename: Name used in log messages and errors

        Returns:
            Text of all pages joined with newlines

        Raises:
            DocumentLoadError: if the PDF cannot be opened or read
        """
        if isinstance(source, (str, Path)):
            file_path = Path(source)
            if not file_path.exists():
                raise DocumentLoadError(f"PDF not found: {file_path}", filename=str(file_path))
            filename = filename or file_path.name
            data = file_path.read_bytes()
        else:
            data = source

        if not data:
            raise DocumentLoadError("Uploaded document is empty", filename=filename)

        logger.info(f"Loading PDF: {filename or '<upload>'} ({len(data)} bytes)")

        page_texts: List[str] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                page_count = len(pdf.pages)
                logger.info(f"PDF has {page_count} pages")

                for page_num, page in enumerate(pdf.pages):
                    if page_num % 10 == 0:
                        logger.debug(f"Processing page {page_num + 1}/{page_count}")
                    page_texts.append(page.extract_text() or "")
        except Exception as e:
            logger.error(f"Error reading PDF {filename or '<upload>'}: {e}")
            raise DocumentLoadError(f"Could not read PDF: {e}", filename=filename) from e

        text = "\n".join(page_texts)
        logger.info(f"Extracted text: {len(page_texts)} pages, {len(text.split())} words")
        return text


def main():
    parser = argparse.ArgumentParser(description="Dump the text of a PDF as the extractor sees it")
    parser.add_argument("pdf_path", help="Path to PDF file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    try:
        text = PDFTextLoader().load_text(args.pdf_path)
    except DocumentLoadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    print(text)


if __name__ == "__main__":
    main()
