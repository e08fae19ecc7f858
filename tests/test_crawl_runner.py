import json
import functools

import pytest

from conftest import PERSON_ID
from imdb_people.services.crawl import Person, runner


@pytest.fixture(autouse=True)
def fake_person(monkeypatch, fetcher, settings):
    monkeypatch.setattr(runner, "Person", functools.partial(Person, fetcher=fetcher, settings=settings))


def test_runner_works(capsys):
    assert runner.main(["works", PERSON_ID, "actor"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [w["id"] for w in out] == ["0111161", "0068646"]


def test_runner_works_shorthand(capsys):
    assert runner.main(["works", PERSON_ID, "works_as_director"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [w["id"] for w in out] == ["0133093"]


def test_runner_unknown_category_exits_nonzero(capsys):
    assert runner.main(["works", PERSON_ID, "works_as_producer"]) == 1
    assert "error:" in capsys.readouterr().err


def test_runner_profile_without_media(capsys):
    assert runner.main(["profile", PERSON_ID, "--no-media"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "Jane Doe"
    assert "images" not in out


def test_runner_videos(capsys):
    assert runner.main(["videos", PERSON_ID]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2
