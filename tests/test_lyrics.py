import pytest
from datetime import date

from domain.errors import FormatError
from domain.services.lyrics import split_verses, paginate_verses
from domain.services.release_date import parse_release_date


def test_split_verses_on_blank_line():
    assert split_verses("v1\n\nv2\n\nv3") == ["v1", "v2", "v3"]
    # 単一改行は節の区切りではない
    assert split_verses("line1\nline2\n\nv2") == ["line1\nline2", "v2"]
    assert split_verses("") == [""]


def test_paginate_first_page():
    verses, total = paginate_verses(["v1", "v2", "v3"], page=1, size=2)
    assert verses == ["v1", "v2"]
    assert total == 3


def test_paginate_last_page_is_clamped():
    verses, total = paginate_verses(["v1", "v2", "v3"], page=2, size=2)
    assert verses == ["v3"]
    assert total == 3


def test_paginate_beyond_end_returns_empty_with_total():
    verses, total = paginate_verses(["v1", "v2", "v3"], page=3, size=2)
    assert verses == []
    assert total == 3


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
def test_paginate_pages_reconstruct_verses(size):
    """全ページを順に結合すると元の節の並びに戻り、total は一定"""
    original = [f"verse {i}" for i in range(1, 8)]
    collected = []
    totals = set()
    page = 1
    while True:
        verses, total = paginate_verses(original, page, size)
        totals.add(total)
        if not verses:
            break
        collected.extend(verses)
        page += 1

    assert collected == original
    assert totals == {len(original)}


def test_parse_release_date():
    assert parse_release_date("16.07.2006") == date(2006, 7, 16)


@pytest.mark.parametrize("value", [
    "2006-07-16", "31.02.2006", "", "16/07/2006", "yesterday",
    "1.7.2006", " 1.07.2006", "01.7.2006", "16.07.2006 ", "16.07.06",
])
def test_parse_release_date_rejects_invalid(value):
    with pytest.raises(FormatError):
        parse_release_date(value)
