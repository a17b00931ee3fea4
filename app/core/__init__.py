"""
Core Package - Financial Report Parser
app/core/__init__.py

Core infrastructure: dependencies (app.core.dependencies), exceptions.
Dependencies are not re-exported here; they import the service layer, which
itself imports these exceptions.
"""

from app.core.exceptions import (
    DocumentLoadError,
    FinancialParserException,
    InvalidFileException,
)

__all__ = [
    "DocumentLoadError",
    "FinancialParserException",
    "InvalidFileException",
]
