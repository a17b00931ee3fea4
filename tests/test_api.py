# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import status

from app.core.dependencies import get_financial_report_parser
from app.core.exceptions import DocumentLoadError, InvalidFileException
from app.main import app
from app.routers.financial_report import upload_financial_report
from app.services.financial_report_parser import FinancialReportParser

UPLOAD_URL = "/api/financial-report/upload"


class BrokenLoader:
    def load_text(self, source, filename=None):
        raise DocumentLoadError("Could not read PDF: no /Root object", filename=filename)


@pytest.fixture
def broken_loader():
    parser = FinancialReportParser(loader=BrokenLoader())
    app.dependency_overrides[get_financial_report_parser] = lambda: parser
    yield
    app.dependency_overrides.pop(get_financial_report_parser, None)



# UPLOAD ENDPOINT TESTS


class TestUploadEndpoint:
    """Tests for POST /api/financial-report/upload endpoint."""

    def test_upload_success(self, client, use_text, sample_text, pdf_upload):
        """A recognisable report returns the nested field map."""
        loader = use_text(sample_text)
        response = client.post(UPLOAD_URL, files=pdf_upload)
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["Assets"]["Current_Assets"]["Cash_and_Cash_Equivalents"] == 29965.0
        assert data["Liabilities_and_Shareholders_Equity"]["Current_Liabilities"]["Accounts_Payable"] == 62611.0
        assert data["Cash_Flow_Statement"]["Cash_Used_in_Financing_Activities"] == -108488.0
        assert data["Segment_Information_And_Geographic_Data"] == {"Americas": 162560.0, "Europe": 94294.0}
        assert loader.calls == ["apple-10k-2023.pdf"]

    def test_upload_omits_unlocated_sections(self, client, use_text, sample_text, pdf_upload):
        use_text(sample_text)
        data = client.post(UPLOAD_URL, files=pdf_upload).json()
        assert "Income_Taxes" not in data
        assert "Lease_Liability_Maturities" not in data

    def test_no_data_extracted(self, client, use_text, pdf_upload):
        """Text with none of the section anchors is a 400."""
        use_text("Quarterly newsletter\nNothing to see here")
        response = client.post(UPLOAD_URL, files=pdf_upload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "No data extracted"}

    def test_unreadable_pdf(self, client, broken_loader, pdf_upload):
        response = client.post(UPLOAD_URL, files=pdf_upload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        data = response.json()
        assert data["error_code"] == "INVALID_FILE"
        assert "no /Root object" in data["message"]
        assert data["details"] == {"filename": "apple-10k-2023.pdf"}
        assert "timestamp" in data

    def test_missing_file_is_validation_error(self, client):
        response = client.post(UPLOAD_URL)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "file"
        assert data["message"] == "Field 'file' is required"

    def test_oversized_upload_rejected(self, client, use_text, sample_text, pdf_upload):
        use_text(sample_text)
        with patch("app.routers.financial_report.get_settings") as mock_settings:
            mock_settings.return_value.MAX_UPLOAD_BYTES = 4
            response = client.post(UPLOAD_URL, files=pdf_upload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "INVALID_FILE"

    def test_upload_at_size_limit_accepted(self, client, use_text, sample_text, pdf_upload):
        use_text(sample_text)
        _, payload, _ = pdf_upload["file"]
        with patch("app.routers.financial_report.get_settings") as mock_settings:
            mock_settings.return_value.MAX_UPLOAD_BYTES = len(payload)
            response = client.post(UPLOAD_URL, files=pdf_upload)
        assert response.status_code == status.HTTP_200_OK



# UPLOAD SIZE LIMIT TESTS


def _upload(size, payload=b""):
    upload = MagicMock()
    upload.filename = "apple-10k-2023.pdf"
    upload.size = size
    upload.read = AsyncMock(return_value=payload)
    return upload


class TestUploadSizeLimit:
    """The limit is enforced without buffering the whole upload."""

    @patch("app.routers.financial_report.get_settings")
    def test_reported_size_checked_before_reading(self, mock_settings):
        mock_settings.return_value.MAX_UPLOAD_BYTES = 10
        upload = _upload(size=10_000)
        with pytest.raises(InvalidFileException):
            asyncio.run(upload_financial_report(file=upload, parser=MagicMock()))
        upload.read.assert_not_called()

    @patch("app.routers.financial_report.get_settings")
    def test_read_is_bounded_when_size_unknown(self, mock_settings):
        mock_settings.return_value.MAX_UPLOAD_BYTES = 10
        upload = _upload(size=None, payload=b"x" * 11)
        with pytest.raises(InvalidFileException):
            asyncio.run(upload_financial_report(file=upload, parser=MagicMock()))
        upload.read.assert_awaited_once_with(11)



# HEALTH & ROOT ENDPOINT TESTS


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["pdfplumber"].startswith("healthy")
        assert data["dependencies"]["extraction_schema"] == "healthy (20 sections)"

    def test_degraded_schema_returns_503(self, client):
        with patch("app.routers.health.check_schema", return_value="unhealthy: duplicate section"):
            response = client.get("/health")
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["status"] == "degraded"


class TestRootEndpoint:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "running"
        assert data["upload"] == UPLOAD_URL
