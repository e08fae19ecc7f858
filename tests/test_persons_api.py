import pytest
from fastapi.testclient import TestClient

from conftest import PERSON_ID, FakeFetcher
from imdb_people.api.routers.persons import get_person_factory
from imdb_people.main import app
from imdb_people.services.crawl import Person


@pytest.fixture
def client(fetcher, settings):
    app.dependency_overrides[get_person_factory] = lambda: (
        lambda imdb_id: Person(imdb_id, fetcher=fetcher, settings=settings)
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health():
    resp = TestClient(app).get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_get_person_profile(client):
    resp = client.get(f"/persons/{PERSON_ID}", params={"image_limit": 1})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == PERSON_ID
    assert data["name"] == "Jane Doe"
    assert data["categories"] == ["Actor", "Director", "Music Department"]
    assert len(data["images"]) == 2
    assert len(data["videos"]) == 2
    assert data["errors"] == {}


def test_get_person_profile_unreachable(settings):
    app.dependency_overrides[get_person_factory] = lambda: (
        lambda imdb_id: Person(imdb_id, fetcher=FakeFetcher({}), settings=settings)
    )
    try:
        resp = TestClient(app).get("/persons/9999999", params={"media": False})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 502


def test_get_person_works(client):
    resp = client.get(f"/persons/{PERSON_ID}/works/actor")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert [w["id"] for w in data["items"]] == ["0111161", "0068646"]


def test_get_person_works_unknown_category(client):
    resp = client.get(f"/persons/{PERSON_ID}/works/producer")
    assert resp.status_code == 404


def test_get_person_images_and_videos(client):
    images = client.get(f"/persons/{PERSON_ID}/images", params={"limit": 0}).json()
    assert images == [
        {
            "thumb": "https://m.media-amazon.com/images/thumb1.jpg",
            "large": "https://m.media-amazon.com/images/large1.jpg",
        }
    ]
    videos = client.get(f"/persons/{PERSON_ID}/videos").json()
    assert [v["page"].rsplit("/", 1)[-1] for v in videos] == ["vi1111111111", "vi3333333333"]
