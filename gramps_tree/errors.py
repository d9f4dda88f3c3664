"""
errors.py - Exception hierarchy for gramps_tree.

Module: gramps_tree.errors
"""
from typing import Any, Optional

__all__ = ['GrampsError', 'ConversionError', 'GrampsApiError']


class GrampsError(Exception):
    """Base class for all gramps_tree errors."""


class ConversionError(GrampsError):
    """
    Raised when a raw Gramps record is missing a structure the converter needs.

    Attributes:
        kind (str): Record kind ('person', 'family', ...).
        gramps_id (Optional[str]): Human-facing id of the offending record, if known.
    """
    def __init__(self, message: str, kind: str = "", gramps_id: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.gramps_id = gramps_id


class GrampsApiError(GrampsError):
    """
    Error response from a Gramps Web server.

    Attributes:
        status_code (int): HTTP status code returned by the server.
        details (Any): Decoded error body, if any.
    """
    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.args[0]}"
