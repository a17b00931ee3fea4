"""
Dependencies - Financial Report Parser
app/core/dependencies.py

FastAPI dependency injection for services.
"""

from functools import lru_cache

from app.config import get_settings
from app.services.financial_report_parser import FinancialReportParser


@lru_cache()
def get_financial_report_parser() -> FinancialReportParser:
    """Get cached FinancialReportParser instance built from settings."""
    return FinancialReportParser.from_settings(get_settings())
