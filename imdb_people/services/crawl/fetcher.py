from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional

import httpx

from ...config import Settings, get_settings
from .errors import FetchError

logger = logging.getLogger(__name__)

# Anything that turns a URL into HTML text; PageFetcher is the default.
Fetcher = Callable[[str], str]


class PageType(str, Enum):
    MAIN = ""
    BIO = "bio"
    MEDIA_INDEX = "mediaindex"
    VIDEO_GALLERY = "videogallery"


def person_url(base_url: str, imdb_id: str, page: PageType = PageType.MAIN) -> str:
    url = f"{base_url.rstrip('/')}/name/{imdb_id}"
    if page.value:
        url = f"{url}/{page.value}"
    return url


class PageFetcher:
    """Blocking HTML getter backed by httpx.

    Each call opens a short-lived client; non-2xx responses and transport
    errors surface as FetchError.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.timeout = float(self.settings.timeout)
        self.headers = headers or {
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html,application/xhtml+xml",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self.transport = transport

    def __call__(self, url: str) -> str:
        return self.get(url)

    def get(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                resp = client.get(url)
                resp.raise_for_status()
                return resp.text
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"{url} returned HTTP {exc.response.status_code}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc
