"""
Service tests for offset/limit pagination.
"""
import pytest

from ileap.services.exceptions import OffsetOutOfRangeError
from ileap.services.pagination import paginate

ITEMS = list(range(25))


def test_first_page():
    page = paginate(ITEMS, limit=10, offset=0)

    assert page.items == list(range(10))
    assert page.next_offset == 10
    assert page.link_header("http://localhost:8000/", "/2/footprints") == (
        '<http://localhost:8000/2/footprints?offset=10&limit=10>; rel="next"'
    )


def test_last_page_has_no_link():
    page = paginate(ITEMS, limit=10, offset=20)

    assert page.items == list(range(20, 25))
    assert page.next_offset is None
    assert page.link_header("http://localhost:8000", "/2/footprints") is None


def test_offset_at_the_end_gives_empty_page():
    page = paginate(ITEMS, limit=10, offset=25)

    assert page.items == []
    assert page.next_offset is None


def test_offset_past_the_end():
    with pytest.raises(OffsetOutOfRangeError) as exc_info:
        paginate(ITEMS, limit=10, offset=26)

    assert exc_info.value.total == 25


def test_limit_is_capped_in_link():
    page = paginate(ITEMS, limit=30, offset=0)

    assert len(page.items) == 25
    assert page.next_offset is None


def test_link_keeps_extra_params():
    page = paginate(ITEMS, limit=10, offset=0)

    link = page.link_header(
        "http://localhost:8000",
        "/2/ileap/tad",
        {"mode": ["Road", "Rail"], "origin.city": ["Basel"]},
    )

    assert link == (
        "<http://localhost:8000/2/ileap/tad?offset=10&limit=10"
        '&mode=Road&mode=Rail&origin.city=Basel>; rel="next"'
    )
