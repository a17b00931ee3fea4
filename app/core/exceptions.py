"""
Custom Exceptions - Financial Report Parser
app/core/exceptions.py

Custom exception classes for document loading and extraction.
"""


class FinancialParserException(Exception):
    """Base exception for the financial report parser."""

    pass


class DocumentLoadError(FinancialParserException):
    """The uploaded document could not be turned into text."""

    def __init__(self, message: str = "Document could not be read", filename: str = None):
        self.message = message
        self.filename = filename
        super().__init__(message)


class InvalidFileException(FinancialParserException):
    """The upload itself is unusable (empty, too large, wrong type)."""

    def __init__(self, message: str = "Invalid file"):
        self.message = message
        super().__init__(message)
