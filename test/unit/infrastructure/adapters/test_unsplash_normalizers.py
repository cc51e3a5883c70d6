import pytest

from conftest import make_collection, make_photo, make_user
from photo_search.core.exceptions import PayloadError
from photo_search.infrastructure.adapters.unsplash.normalizers import (
    body_search_envelope,
    build_attribution,
    header_listing_envelope,
    next_page_for,
    normalize_collection,
    normalize_photo,
    parse_total_header,
    previous_page_for,
    total_pages_for,
)

SITE = "https://unsplash.com"


@pytest.mark.parametrize(
    "page,total_pages,expected_next,expected_prev",
    [
        (1, 1, None, None),
        (1, 3, 2, None),
        (2, 3, 3, 1),
        (3, 3, None, 2),
        (5, 3, None, 4),
        (1, 0, None, None),
    ],
)
def test_page_links(page, total_pages, expected_next, expected_prev):
    assert next_page_for(page, total_pages) == expected_next
    assert previous_page_for(page) == expected_prev


@pytest.mark.parametrize(
    "value,expected",
    [("95", 95), (" 7 ", 7), (None, 0), ("", 0), ("abc", 0), ("-3", 0)],
)
def test_parse_total_header(value, expected):
    assert parse_total_header(value) == expected


@pytest.mark.parametrize(
    "total,page_size,expected",
    [(95, 20, 5), (100, 20, 5), (1, 40, 1), (0, 20, 1), (10, 0, 1)],
)
def test_total_pages_for(total, page_size, expected):
    assert total_pages_for(total, page_size) == expected


def test_normalize_photo_without_suffix_uses_regular_url():
    item = normalize_photo(make_photo("p1"), app_id="my_app", url_suffix="", site_url=SITE)

    assert item.type == "photo"
    assert item.url == "https://images.unsplash.com/photo-p1?w=1080"
    assert item.raw == "https://images.unsplash.com/photo-p1?ixid=1"
    assert item.thumb == "https://images.unsplash.com/photo-p1?w=200"
    assert item.download_location == "https://api.unsplash.com/photos/p1/download?ixid=1"
    assert (item.width, item.height, item.likes) == (4000, 3000, 12)
    assert item.user["username"] == "janedoe"
    assert item.slug == "a-cat-p1"


def test_attribution_credits_photographer_and_service():
    text = build_attribution(make_user("Jane Doe", "janedoe"), "my_app", SITE)

    assert 'href="https://unsplash.com/@janedoe?utm_source=my_app&utm_medium=referral"' in text
    assert ">Jane Doe</a>" in text
    assert 'href="https://unsplash.com/?utm_source=my_app&utm_medium=referral">Unsplash</a>' in text


def test_attribution_escapes_photographer_name():
    text = build_attribution(make_user("<b>Bob</b>", "bob"), "app", SITE)

    assert "&lt;b&gt;Bob&lt;/b&gt;" in text


def test_normalize_collection_thumb_from_cover():
    with_cover = normalize_collection(make_collection("42"))
    without_cover = normalize_collection(make_collection("43", with_cover=False))

    assert with_cover.thumb == "https://images.unsplash.com/photo-cover1?w=400"
    assert with_cover.total_photos == 17
    assert without_cover.thumb is None
    assert without_cover.type == "collection"


def test_body_search_envelope_rejects_non_object():
    with pytest.raises(PayloadError):
        body_search_envelope([], page=1, query="q", mapper=normalize_collection)


def test_body_search_envelope_rejects_bad_items():
    with pytest.raises(PayloadError):
        body_search_envelope(
            {"total": 1, "total_pages": 1, "results": [{"title": "no id"}]},
            page=1,
            query="q",
            mapper=normalize_collection,
        )


def test_header_listing_envelope_rejects_object_body():
    with pytest.raises(PayloadError):
        header_listing_envelope(
            {"errors": ["nope"]}, "10", page=1, page_size=10, query="u", mapper=normalize_collection
        )


def test_attribution_falls_back_to_default_template():
    text = build_attribution(make_user(), "my_app", SITE, template="")

    assert text.startswith("Photo by ")
