import pytest

from recipebook.domain import InvariantViolation, Page, SortDirection
from recipebook.domain.pagination import count_pages


@pytest.mark.parametrize(
    ("total", "size", "expected"),
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (3, 1, 3)],
)
def test_count_pages(total: int, size: int, expected: int) -> None:
    assert count_pages(total, size) == expected


def test_paginate_slices_in_order() -> None:
    page = Page.paginate([1, 2, 3, 4, 5], page_number=2, page_size=2)
    assert page.items == (3, 4)
    assert page.total_items == 5
    assert page.total_pages == 3


def test_page_past_the_end_is_empty_with_totals() -> None:
    page = Page.paginate([1, 2, 3], page_number=9, page_size=2)
    assert page.items == ()
    assert page.total_items == 3
    assert page.total_pages == 2


def test_page_rejects_more_items_than_size() -> None:
    with pytest.raises(InvariantViolation):
        Page(page_number=1, page_size=1, total_pages=2, total_items=2, items=[1, 2])


def test_page_rejects_inconsistent_totals() -> None:
    with pytest.raises(InvariantViolation):
        Page(page_number=1, page_size=2, total_pages=1, total_items=3, items=[1, 2])


@pytest.mark.parametrize("page_number", [0, -1])
def test_page_numbers_start_at_one(page_number: int) -> None:
    with pytest.raises(InvariantViolation):
        Page.paginate([1], page_number=page_number, page_size=1)


def test_page_map_and_to_dict() -> None:
    page = Page.paginate(["a", "b"], page_number=1, page_size=5).map(str.upper)
    assert page.to_dict(lambda item: {"v": item}) == {
        "page_number": 1,
        "page_size": 5,
        "total_pages": 1,
        "total_items": 2,
        "items": [{"v": "A"}, {"v": "B"}],
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("desc", SortDirection.DESC), ("DESC", SortDirection.DESC), ("asc", SortDirection.ASC),
     ("sideways", SortDirection.ASC), (None, SortDirection.ASC)],
)
def test_sort_direction_parse(raw, expected) -> None:
    assert SortDirection.parse(raw) is expected
