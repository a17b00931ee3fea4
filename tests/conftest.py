# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and document text for all tests

SAMPLE DOCUMENT PAGE REFERENCE (split on "Apple Inc. | 2023 Form 10-K"):
- Page 0: cover page
- Page 1: CONSOLIDATED STATEMENTS OF OPERATIONS
- Page 2: CONSOLIDATED BALANCE SHEETS + LIABILITIES AND SHAREHOLDERS’ EQUITY:
- Page 3: CONSOLIDATED STATEMENTS OF CASH FLOWS
- Page 4: Note 2 net sales by category + Note 3 – Earnings Per Share
- Page 5: Derivative Instruments and Hedging
- Page 6: Note 13 – Segment Information and Geographic Data
"""

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_financial_report_parser
from app.extraction.pages import DEFAULT_PAGE_MARKER
from app.main import app
from app.services.financial_report_parser import FinancialReportParser


# =============================================================================
# SAMPLE DOCUMENT TEXT
# =============================================================================

COVER_PAGE = """UNITED STATES
SECURITIES AND EXCHANGE COMMISSION
Washington, D.C. 20549
FORM 10-K
For the fiscal year ended September 30, 2023
Apple Inc.
"""

OPERATIONS_PAGE = """ | 28
CONSOLIDATED STATEMENTS OF OPERATIONS
(In millions, except number of shares, which are reflected in thousands, and per-share amounts)
Years ended
September 30, 2023 September 24, 2022 September 25, 2021
Net sales:
Products $ 298,085 $ 316,199 $ 297,392
Services 85,200 78,129 68,425
Total net sales 383,285 394,328 365,817
Cost of sales:
Products 189,282 201,471 192,266
Services 24,855 22,075 20,715
Total cost of sales 214,137 223,546 212,981
Gross margin 169,148 170,782 152,836
Operating expenses:
Research and development 29,915 26,251 21,914
Selling, general and administrative 24,932 25,094 21,973
Total operating expenses 54,847 51,345 43,887
Operating income 114,301 119,437 108,949
Other income/(expense), net (565) (334) 258
Earnings per share:
Basic $ 6.16 $ 6.15 $ 5.67
Diluted $ 6.13 $ 6.11 $ 5.61
"""

BALANCE_SHEET_PAGE = """ | 30
CONSOLIDATED BALANCE SHEETS
(In millions, except number of shares, which are reflected in thousands, and par value)
September 30, 2023 September 24, 2022
ASSETS:
Current assets:
Cash and cash equivalents $ 29,965 $ 23,646
Marketable securities 31,590 24,658
Accounts receivable, net 29,508 28,184
Non-current assets:
Marketable securities 100,544 120,805
Property, plant and equipment, net 43,715 42,117
LIABILITIES AND SHAREHOLDERS’ EQUITY:
Current liabilities:
Accounts payable $ 62,611 $ 64,115
Other current liabilities 58,829 60,845
Term debt 9,822 11,128
Non-current liabilities:
Term debt 95,281 98,959
Other non-current liabilities 49,848 49,142
"""

CASH_FLOW_PAGE = """ | 32
CONSOLIDATED STATEMENTS OF CASH FLOWS
(In millions)
Operating activities:
Net income $ 96,995 $ 99,803 $ 94,680
Depreciation and amortization 11,519 11,104 11,284
Cash generated by operating activities 110,543 122,151 104,038
Cash generated by/(used in) investing activities 3,705 (22,354) (14,545)
Cash used in financing activities (108,488) (110,749) (93,353)
"""

NOTE_3_PAGE = """ | 38
Net sales disaggregated by significant products and services for 2023, 2022 and 2021 were as follows (in millions):
2023 2022 2021
iPhone (1) $ 200,583 $ 205,489 $ 191,973
Mac (1) 29,357 40,177 35,190
iPad (1) 28,300 29,292 31,862
Wearables, Home and Accessories (1) 39,845 41,241 38,367
Services (2) 85,200 78,129 68,425
Total net sales $ 383,285 $ 394,328 $ 365,817
Note 3 – Earnings Per Share
Basic earnings per share $ 6.16 $ 6.15 $ 5.67
Diluted earnings per share $ 6.13 $ 6.11 $ 5.61
"""

DERIVATIVES_PAGE = """ | 41
Derivative Instruments and Hedging
Due after 1 year through 5 years 58,327
Due after 5 years through 10 years 21,364
Due after 10 years 20,853
Total fair value $ 100,544
Derivative instruments designated as accounting hedges:
Foreign exchange contracts $ 74,730 $ 102,694
Interest rate contracts $ 19,375 $ 20,125
"""

SEGMENT_PAGE = """ | 52
Note 13 – Segment Information and Geographic Data
The Company’s reportable segments consist of the Americas, Europe, Greater China, Japan and Rest of Asia Pacific.
2023 2022 2021
Americas:
Net sales $ 162,560 $ 169,658 $ 153,306
Operating income $ 60,508 $ 62,683 $ 53,382
Europe:
Net sales $ 94,294 $ 95,118 $ 89,307
Operating income $ 36,098 $ 35,233 $ 32,505
"""

SAMPLE_PAGES = [
    COVER_PAGE,
    OPERATIONS_PAGE,
    BALANCE_SHEET_PAGE,
    CASH_FLOW_PAGE,
    NOTE_3_PAGE,
    DERIVATIVES_PAGE,
    SEGMENT_PAGE,
]

SAMPLE_10K_TEXT = DEFAULT_PAGE_MARKER.join(SAMPLE_PAGES)


class FakeTextLoader:
    """Stands in for PDFTextLoader: returns fixed text for any upload."""

    def __init__(self, text: str):
        self.text = text
        self.calls = []

    def load_text(self, source, filename=None):
        self.calls.append(filename)
        return self.text


# =============================================================================
# DOCUMENT FIXTURES
# =============================================================================

@pytest.fixture
def sample_text():
    return SAMPLE_10K_TEXT


@pytest.fixture
def sample_pages():
    return list(SAMPLE_PAGES)


@pytest.fixture
def operations_page():
    return OPERATIONS_PAGE


@pytest.fixture
def balance_sheet_page():
    return BALANCE_SHEET_PAGE


@pytest.fixture
def segment_page():
    return SEGMENT_PAGE


@pytest.fixture
def note_3_page():
    return NOTE_3_PAGE


@pytest.fixture
def derivatives_page():
    return DERIVATIVES_PAGE


# =============================================================================
# FASTAPI TEST CLIENT FIXTURES
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def use_text(client):
    """
    Make the upload endpoint read the given text instead of decoding a PDF.

    Usage: use_text(SAMPLE_10K_TEXT); client.post(...)
    """
    def _override(text: str) -> FakeTextLoader:
        loader = FakeTextLoader(text)
        parser = FinancialReportParser(loader=loader, max_workers=4)
        app.dependency_overrides[get_financial_report_parser] = lambda: parser
        return loader

    yield _override
    app.dependency_overrides.pop(get_financial_report_parser, None)


@pytest.fixture
def pdf_upload():
    """Multipart payload for the upload endpoint."""
    return {"file": ("apple-10k-2023.pdf", b"%PDF-1.7 fake bytes", "application/pdf")}
