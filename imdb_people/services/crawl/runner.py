from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .errors import ExtractionError
from .person import Person


def _dump(obj: Any) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def run_profile(imdb_id: str, *, image_limit: int, media: bool) -> dict:
    return Person(imdb_id).profile(image_limit=image_limit, include_media=media)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape IMDb person pages")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests and degraded fields")
    sub = parser.add_subparsers(dest="cmd", required=True)

    profile = sub.add_parser("profile", help="Print every field of a person as JSON")
    profile.add_argument("imdb_id", help="IMDb name id without the nm prefix (e.g., 0000246)")
    profile.add_argument("--image-limit", type=int, default=10)
    profile.add_argument("--no-media", action="store_true", help="Skip images and videos")

    works = sub.add_parser("works", help="List titles in one credit category")
    works.add_argument("imdb_id")
    works.add_argument("category", help="e.g. actor, director, or works_as_director")

    images = sub.add_parser("images", help="List gallery images")
    images.add_argument("imdb_id")
    images.add_argument("--limit", type=int, default=10)

    videos = sub.add_parser("videos", help="List video page/embed URLs")
    videos.add_argument("imdb_id")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.cmd == "profile":
            _dump(run_profile(args.imdb_id, image_limit=args.image_limit, media=not args.no_media))
            return 0

        person = Person(args.imdb_id)
        if args.cmd == "works":
            if args.category.startswith("works_as_"):
                refs = person.invoke(args.category)
            else:
                refs = person.works_as(args.category)
            _dump([w.to_dict() for w in refs])
            return 0
        if args.cmd == "images":
            _dump([i.to_dict() for i in person.images(args.limit)])
            return 0
        if args.cmd == "videos":
            _dump([v.to_dict() for v in person.video_urls()])
            return 0
    except ExtractionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
