"""Custom exceptions for docpager."""

from typing import Optional


class DocPagerError(Exception):
    """Base exception for docpager errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(DocPagerError):
    """Exception raised while reading editor content."""

    pass


class StyleError(DocPagerError):
    """Exception raised for an invalid stylesheet definition."""

    pass


class LayoutError(DocPagerError):
    """Exception raised during page packing or layout validation."""

    pass


class MeasurementError(DocPagerError):
    """Exception raised while measuring a block."""

    pass


class MeasurementUnavailableError(MeasurementError):
    """Raised when the measurement surface cannot be created."""

    pass


class RenderingError(DocPagerError):
    """Exception raised while rendering pages."""

    pass
