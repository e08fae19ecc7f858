from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for failures while fetching or reading a profile page."""


class FetchError(ExtractionError):
    """The page could not be retrieved (transport error or non-2xx status)."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class StructureError(ExtractionError):
    """The page was retrieved but its markup did not have the expected shape."""


class UnknownOperationError(ExtractionError, AttributeError):
    """Raised by Person.invoke for names that resolve to no operation."""
