"""Lazy accessor for an IMDb person profile.

A Person performs no HTTP request when created. Each accessor fetches the
sub-page it needs on first use (main profile, bio, mediaindex, videogallery),
keeps the parsed document for the lifetime of the instance and caches the
extracted value.

Failure policy per field:
- avatar_url, name, bio, video_urls: any failure yields None / [].
- images: a failing thumbnail degrades to an empty ImageLink; a failing
  listing yields [].
- birthdate, age, categories, works_as: FetchError / StructureError propagate.

Usage:
    person = Person("0000246")
    person.name()
    person.works_as("actor")
    person.invoke("works_as_director")
"""

from __future__ import annotations

import functools
import logging
import re
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar
from urllib.parse import urljoin

from selectolax.parser import HTMLParser, Node

from ...config import Settings, get_settings
from .base import ImageLink, VideoLink, WorkRef, squish, strip_preset, unescape_html
from .errors import ExtractionError, FetchError, StructureError, UnknownOperationError
from .fetcher import Fetcher, PageFetcher, PageType, person_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

# preset key -> instance attribute holding the cached value
_PRESETTABLE = {
    "name": "_name",
    "avatar_url": "_avatar_url",
    "bio": "_bio",
    "name_alias": "name_alias",
    "url": "url",
}

_OPERATIONS = frozenset(
    ["name", "avatar_url", "bio", "birthdate", "age", "categories", "works_as", "images", "video_urls"]
)
_WORKS_AS_PATTERN = re.compile(r"^works_as_(.+)$")
_SECTION_KEY = re.compile(r"^[\w-]+$")
_TRAILING_YEAR = re.compile(r"(\d+)$")
_ITALIC_TAIL = re.compile(r"<i.*", re.IGNORECASE | re.DOTALL)


def _is_element(node: Optional[Node]) -> bool:
    # selectolax reports text/comment nodes with tags like "-text"
    return node is not None and bool(node.tag) and node.tag[0].isalpha()


def _inner_html(node: Node) -> str:
    return "".join(child.html or "" for child in node.iter(include_text=True))


def _first_element_child(node: Node) -> Optional[Node]:
    for child in node.iter(include_text=False):
        if _is_element(child):
            return child
    return None


def _next_element(node: Node) -> Optional[Node]:
    sib = node.next
    while sib is not None and not _is_element(sib):
        sib = sib.next
    return sib


def _attr(node: Optional[Node], name: str) -> str:
    if node is None:
        raise StructureError(f"missing element for attribute {name!r}")
    value = node.attributes.get(name)
    if not value:
        raise StructureError(f"<{node.tag}> has no {name!r} attribute")
    return value


class Person:
    """Represents someone on IMDb, identified by the numeric part of their name id."""

    def __init__(
        self,
        imdb_id: str,
        preset_attributes: Optional[Mapping[str, Any]] = None,
        *,
        fetcher: Optional[Fetcher] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.id = str(imdb_id).strip()
        self.url = person_url(self.settings.base_url, self.id)
        self.name_alias: Optional[str] = None
        self._fetch: Fetcher = fetcher or PageFetcher(settings=self.settings)

        self._documents: Dict[PageType, HTMLParser] = {}
        self._name: Optional[str] = None
        self._avatar_url: Optional[str] = None
        self._bio: Optional[str] = None
        self._birthdate: Optional[str] = None
        self._categories: Optional[List[str]] = None
        self._works: Dict[str, List[WorkRef]] = {}
        self._images: Dict[int, List[ImageLink]] = {}
        self._videos: Optional[List[VideoLink]] = None

        for key, value in (preset_attributes or {}).items():
            slot = _PRESETTABLE.get(key)
            if slot is None:
                logger.debug("person %s: ignoring unknown preset %r", self.id, key)
                continue
            text = strip_preset(value)
            if text is not None:
                setattr(self, slot, text)

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, name={self._name!r})"

    # --- Swallowing accessors ---
    def avatar_url(self) -> Optional[str]:
        if self._avatar_url is None:
            self._avatar_url = self._degrade(
                "avatar_url",
                lambda: _attr(self._document(PageType.MAIN).css_first("#name-poster"), "src"),
                None,
            )
        return self._avatar_url

    def name(self, force_refresh: bool = False) -> Optional[str]:
        if self._name is not None and not force_refresh:
            return self._name
        self._name = self._degrade("name", self._extract_name, None)
        return self._name

    def bio(self, transform: Optional[Callable[[str], str]] = None) -> Optional[str]:
        """Biography text from the bio page, without the trailing attribution.

        When transform is given it is applied to the text and its result is
        what gets returned and cached.
        """
        if self._bio is None:

            def _extract() -> str:
                text = self._extract_bio()
                return transform(text) if transform else text

            self._bio = self._degrade("bio", _extract, None)
        return self._bio

    def images(self, limit: int = 10) -> List[ImageLink]:
        """Thumbnail/large image pairs for the first ``limit + 1`` gallery entries."""
        limit = max(0, int(limit))
        if limit not in self._images:
            links = self._degrade(
                "images",
                lambda: self._document(PageType.MEDIA_INDEX).css("#media_index_thumbnail_grid a"),
                None,
            )
            if links is None:
                return []
            self._images[limit] = [self._image_link(link) for link in links[: limit + 1]]
        return self._images[limit]

    def video_urls(self) -> List[VideoLink]:
        if self._videos is None:
            videos = self._degrade("video_urls", self._extract_videos, None)
            if videos is None:
                return []
            self._videos = videos
        return self._videos

    # --- Propagating accessors ---
    def birthdate(self) -> str:
        if self._birthdate is None:
            doc = self._document(PageType.MAIN)
            self._birthdate = squish("".join(n.text() for n in doc.css("time[itemprop=birthDate]")))
        return self._birthdate

    def age(self, today: Optional[date] = None) -> int:
        """Current year minus the year at the end of the birth date."""
        born = self.birthdate()
        match = _TRAILING_YEAR.search(born)
        if not match:
            raise StructureError(f"person {self.id}: no birth year in {born!r}")
        return (today or date.today()).year - int(match.group(1))

    def categories(self) -> List[str]:
        """Work categories exercised by the person, e.g. Actor, Director."""
        if self._categories is None:
            doc = self._document(PageType.MAIN)
            self._categories = [n.text().strip() for n in doc.css("#jumpto a")]
        return self._categories

    def works_as(self, category: str) -> List[WorkRef]:
        """Titles the person is credited on in one category, e.g. ``works_as("actor")``."""
        key = str(category).strip().lower().replace(" ", "_")
        if key not in self._works:
            self._works[key] = self._extract_works(key)
        return list(self._works[key])

    # --- Dispatch ---
    def resolve(self, operation: str) -> Callable[..., Any]:
        """Map an operation name to a bound callable.

        ``works_as_<category>`` resolves only when the category (underscores
        read as spaces) is one of this person's categories.
        """
        if operation in _OPERATIONS:
            return getattr(self, operation)
        match = _WORKS_AS_PATTERN.match(operation)
        if match:
            category = match.group(1).replace("_", " ").lower()
            if category in [c.lower() for c in self.categories()]:
                return functools.partial(self.works_as, category)
        raise UnknownOperationError(f"{type(self).__name__} has no operation {operation!r}")

    def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        return self.resolve(operation)(*args, **kwargs)

    # --- Snapshot ---
    def profile(self, *, image_limit: int = 10, include_media: bool = True) -> Dict[str, Any]:
        """Collect every field into a JSON-serializable dict.

        Propagating fields that fail are reported as None/[] and listed under
        "errors" instead of aborting the whole snapshot.
        """
        errors: Dict[str, str] = {}

        def attempt(field: str, fn: Callable[[], T], default: T) -> T:
            try:
                return fn()
            except ExtractionError as exc:
                errors[field] = str(exc)
                return default

        categories = attempt("categories", self.categories, [])
        works: Dict[str, List[Dict[str, Any]]] = {}
        for category in categories:
            refs = attempt(f"works.{category}", lambda: self.works_as(category), [])
            works[category] = [w.to_dict() for w in refs]

        data: Dict[str, Any] = {
            "id": self.id,
            "url": self.url,
            "name": self.name(),
            "name_alias": self.name_alias,
            "avatar_url": self.avatar_url(),
            "birthdate": attempt("birthdate", self.birthdate, None),
            "age": attempt("age", self.age, None),
            "categories": categories,
            "works": works,
            "bio": self.bio(),
        }
        if include_media:
            data["images"] = [i.to_dict() for i in self.images(image_limit)]
            data["videos"] = [v.to_dict() for v in self.video_urls()]
        data["errors"] = errors
        return data

    # --- Internals ---
    def _document(self, page: PageType) -> HTMLParser:
        doc = self._documents.get(page)
        if doc is None:
            url = person_url(self.settings.base_url, self.id, page)
            doc = self._load(url)
            self._documents[page] = doc
        return doc

    def _load(self, url: str) -> HTMLParser:
        try:
            text = self._fetch(url)
        except ExtractionError:
            raise
        except Exception as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc
        if not isinstance(text, (str, bytes)):
            raise StructureError(f"{url}: expected HTML text, got {type(text).__name__}")
        try:
            return HTMLParser(text)
        except Exception as exc:
            raise StructureError(f"{url}: unparsable HTML: {exc}") from exc

    def _degrade(self, field: str, fn: Callable[[], T], default: Optional[T]) -> Optional[T]:
        try:
            return fn()
        except Exception as exc:
            logger.debug("person %s: %s unavailable: %s", self.id, field, exc)
            return default

    def _extract_name(self) -> str:
        heading = self._document(PageType.MAIN).css_first("h1")
        if heading is None:
            raise StructureError(f"person {self.id}: no <h1> on profile page")
        return heading.text().strip()

    def _extract_bio(self) -> str:
        nodes = self._document(PageType.BIO).css("#bio_content .soda p")
        if not nodes:
            raise StructureError(f"person {self.id}: no biography block")
        raw = "".join(_inner_html(n) for n in nodes)
        return unescape_html(_ITALIC_TAIL.sub("", raw).strip())

    def _extract_works(self, key: str) -> List[WorkRef]:
        if not _SECTION_KEY.match(key):
            raise StructureError(f"person {self.id}: invalid category {key!r}")
        doc = self._document(PageType.MAIN)
        head = doc.css_first(f"#filmo-head-{key}")
        if head is None:
            raise StructureError(f"person {self.id}: no filmography section for {key!r}")
        section = _next_element(head)
        if section is None:
            raise StructureError(f"person {self.id}: filmography section {key!r} has no list")

        works: List[WorkRef] = []
        for row in section.iter(include_text=False):
            if not _is_element(row):
                continue
            match = re.search(r"\d+", row.attributes.get("id") or "")
            if not match:
                raise StructureError(f"person {self.id}: filmography row without a title id")
            title_id = match.group(0)
            works.append(WorkRef(id=title_id, url=f"{self.settings.base_url}/title/tt{title_id}/"))
        return works

    def _image_link(self, link: Node) -> ImageLink:
        try:
            thumb = _attr(_first_element_child(link), "src")
            large_url = urljoin(self.settings.base_url + "/", _attr(link, "href"))
            large_doc = self._load(large_url)
            large = _attr(large_doc.css_first("img#primary-img"), "src")
        except Exception as exc:
            logger.debug("person %s: image entry unavailable: %s", self.id, exc)
            return ImageLink()
        return ImageLink(thumb=thumb, large=large)

    def _extract_videos(self) -> List[VideoLink]:
        doc = self._document(PageType.VIDEO_GALLERY)
        videos: List[VideoLink] = []
        for link in doc.css(".results-item a:first-child"):
            video_id = link.attributes.get("data-video")
            if not video_id:
                continue
            videos.append(
                VideoLink(
                    page=f"{self.settings.base_url}/video/imdb/{video_id}",
                    embed=f"{self.settings.embed_base_url}/video/imdb/{video_id}/imdb/embed",
                )
            )
        return videos
