"""
Services module for the Financial Report Parser.
"""

from app.services.financial_report_parser import FinancialReportParser

__all__ = ["FinancialReportParser"]
