from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException, Query

from imdb_people.models.person import ImageOut, PersonProfile, VideoOut, WorksResponse
from imdb_people.services.crawl import FetchError, Person, StructureError


router = APIRouter(tags=["persons"])

PersonFactory = Callable[[str], Person]


def get_person_factory() -> PersonFactory:
    """Dependency returning a Person constructor; overridden in tests."""
    return Person


@router.get("/persons/{imdb_id}", response_model=PersonProfile)
def api_get_person(
    imdb_id: str,
    image_limit: int = Query(10, ge=0, le=50),
    media: bool = Query(True, description="Include images and videos (extra requests)"),
    make_person: PersonFactory = Depends(get_person_factory),
):
    person = make_person(imdb_id)
    data = person.profile(image_limit=image_limit, include_media=media)
    if data["name"] is None and "categories" in data["errors"]:
        # Nothing could be read from the main profile page
        raise HTTPException(status_code=502, detail=data["errors"]["categories"])
    return data


@router.get("/persons/{imdb_id}/works/{category}", response_model=WorksResponse)
def api_get_person_works(
    imdb_id: str,
    category: str,
    make_person: PersonFactory = Depends(get_person_factory),
):
    person = make_person(imdb_id)
    try:
        works = person.works_as(category)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=f"Profile page unavailable: {exc}")
    except StructureError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {
        "person": {"id": person.id, "url": person.url},
        "category": category,
        "count": len(works),
        "items": [w.to_dict() for w in works],
    }


@router.get("/persons/{imdb_id}/images", response_model=List[ImageOut])
def api_get_person_images(
    imdb_id: str,
    limit: int = Query(10, ge=0, le=50),
    make_person: PersonFactory = Depends(get_person_factory),
):
    return [i.to_dict() for i in make_person(imdb_id).images(limit)]


@router.get("/persons/{imdb_id}/videos", response_model=List[VideoOut])
def api_get_person_videos(imdb_id: str, make_person: PersonFactory = Depends(get_person_factory)):
    return [v.to_dict() for v in make_person(imdb_id).video_urls()]
