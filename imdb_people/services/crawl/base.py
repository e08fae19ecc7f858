from __future__ import annotations

import html
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

_WS_RUN = re.compile(r"\s+")


def unescape_html(text: str) -> str:
    """Decode named and numeric HTML entities (``&amp;``, ``&#39;``, ``&#x27;``)."""
    return html.unescape(text or "")


def squish(text: str) -> str:
    """Drop newlines, collapse whitespace runs to a single space and trim."""
    return _WS_RUN.sub(" ", (text or "").replace("\n", "")).strip()


def strip_preset(value: Any) -> Optional[str]:
    """Coerce a preset attribute value to clean text.

    Returns None when the value is missing (None/False) or can't be turned
    into a string.
    """
    if value is None or value is False:
        return None
    try:
        text = str(value)
    except Exception:
        return None
    return text.replace('"', "").strip()


@dataclass
class WorkRef:
    """A title the person is credited on, e.g. ``WorkRef(id="0111161")``."""

    id: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ImageLink:
    thumb: Optional[str] = None
    large: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.thumb is None and self.large is None

    def to_dict(self) -> Dict[str, Any]:
        # An item that failed to resolve serializes as {}
        if self.is_empty:
            return {}
        return asdict(self)


@dataclass
class VideoLink:
    page: str
    embed: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
