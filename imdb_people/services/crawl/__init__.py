"""IMDb person scraping.

Structure:
- errors.py: FetchError / StructureError / UnknownOperationError
- base.py: result records and text utilities
- fetcher.py: page types, URL building, httpx-backed PageFetcher
- person.py: lazy Person accessor (selectolax parsing)
- runner.py: tiny CLI entrypoint for manual runs
"""

from .base import ImageLink, VideoLink, WorkRef
from .errors import ExtractionError, FetchError, StructureError, UnknownOperationError
from .fetcher import PageFetcher, PageType
from .person import Person

__all__ = [
    "ExtractionError",
    "FetchError",
    "ImageLink",
    "PageFetcher",
    "PageType",
    "Person",
    "StructureError",
    "UnknownOperationError",
    "VideoLink",
    "WorkRef",
]
