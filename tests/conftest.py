from pathlib import Path
from typing import Dict, List, Union

import httpx
import pytest

from imdb_people.config import Settings

BASE = "http://akas.imdb.com"
PERSON_ID = "0000246"
MAIN_URL = f"{BASE}/name/{PERSON_ID}"


def read_fixture(name: str) -> str:
    p = Path(__file__).parent / "fixtures" / name
    return p.read_text(encoding="utf-8")


class FakeFetcher:
    """Serves canned pages by URL and records every request.

    A page mapped to an exception instance raises it instead.
    """

    def __init__(self, pages: Dict[str, Union[str, Exception]]) -> None:
        self.pages = dict(pages)
        self.calls: List[str] = []

    def __call__(self, url: str) -> str:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise httpx.ConnectError(f"no route to {url}")
        if isinstance(page, Exception):
            raise page
        return page

    def count(self, url: str) -> int:
        return self.calls.count(url)


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE, embed_base_url="http://www.imdb.com", timeout=5.0)


@pytest.fixture
def site_pages() -> Dict[str, Union[str, Exception]]:
    pages: Dict[str, Union[str, Exception]] = {
        MAIN_URL: read_fixture("person_main.html"),
        f"{MAIN_URL}/bio": read_fixture("person_bio.html"),
        f"{MAIN_URL}/mediaindex": read_fixture("person_mediaindex.html"),
        f"{MAIN_URL}/videogallery": read_fixture("person_videogallery.html"),
    }
    for n in range(1, 6):
        pages[f"{BASE}/name/nm0000246/mediaviewer/rm{n}"] = (
            f'<html><body><img id="primary-img" src="https://m.media-amazon.com/images/large{n}.jpg"></body></html>'
        )
    return pages


@pytest.fixture
def fetcher(site_pages) -> FakeFetcher:
    return FakeFetcher(site_pages)
