from imdb_people.services.crawl.base import ImageLink, squish, strip_preset, unescape_html


def test_squish_drops_newlines_and_collapses_runs():
    assert squish("\n  1 January\n   1970  \n") == "1 January 1970"
    assert squish("") == ""


def test_unescape_html_named_and_numeric():
    assert unescape_html("Tom &amp; Jerry&#39;s &quot;show&quot; &#x27;x&#x27;") == "Tom & Jerry's \"show\" 'x'"


def test_strip_preset():
    assert strip_preset('  Foo"Bar  ') == "FooBar"
    assert strip_preset(1970) == "1970"
    assert strip_preset(None) is None
    assert strip_preset("") == ""
    assert strip_preset(0) == "0"
    assert strip_preset(False) is None


def test_image_link_empty():
    assert ImageLink().is_empty
    assert not ImageLink(thumb="t").is_empty
    assert ImageLink(thumb="t", large="l").to_dict() == {"thumb": "t", "large": "l"}
