"""Exception classes for table extraction.

Every error carries a machine readable ``code`` and an optional ``details``
mapping so callers can report failures consistently.

Error format (from ``format_error``):
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable error message",
        "details": {...}  # Optional additional details
    }
}
"""

from typing import Any, Dict, Optional


class TableishError(Exception):
    """Base class for table extraction errors."""

    def __init__(
        self,
        message: str,
        code: str = "TABLEISH_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidSelector(TableishError):
    """A row or column selector is neither a query string nor a callable."""

    def __init__(self, message: str, role: Optional[str] = None, value: Any = None):
        details = {}
        if role:
            details["role"] = role
        if value is not None:
            details["type"] = type(value).__name__
        super().__init__(
            message=message,
            code="INVALID_SELECTOR",
            details=details,
        )
        self.role = role


class SourceUnavailable(TableishError):
    """No HTML markup could be obtained from the given source."""

    def __init__(self, source: Any):
        super().__init__(
            message=f"Cannot read HTML from {type(source).__name__} object",
            code="SOURCE_UNAVAILABLE",
            details={"type": type(source).__name__},
        )


class TableMismatch(TableishError, AssertionError):
    """An extracted table differs from the expected one."""

    def __init__(self, diff):
        super().__init__(
            message=diff.summary(),
            code="TABLE_MISMATCH",
            details=diff.to_dict(),
        )
        self.diff = diff


def format_error(error: TableishError) -> Dict[str, Any]:
    """Format a consistent error structure."""
    response = {
        "error": {
            "code": error.code,
            "message": error.message,
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return response
