"""Unit tests for page arithmetic and pager construction."""

import pytest

from chatter.pagination import PageLink, create_pagination, page_index, total_pages


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0),
        ("1", 0),
        ("4", 3),
        (4, 3),
        ("0", 0),
        ("-3", 0),
        ("abc", 0),
        ("2.5", 0),
    ],
    ids=["missing", "first", "fourth", "int", "zero", "negative", "non_numeric", "fraction"],
)
def test_page_index(raw: str | int | None, expected: int) -> None:
    assert page_index(raw) == expected


@pytest.mark.parametrize(
    "count, expected",
    [(25, 3), (47, 5), (10, 1), (1, 1), (0, 0), (-5, 0)],
)
def test_total_pages(count: int, expected: int) -> None:
    assert total_pages(count, 10) == expected


def test_never_more_links_than_pages_and_never_raises() -> None:
    for pages in range(-2, 15):
        for current in range(-1, 20):
            pagination = create_pagination(current, pages, window=3)
            assert len(pagination.links) <= max(pages, 0)
            assert all(1 <= link.number <= pages for link in pagination.links)


@pytest.mark.parametrize("pages", [0, -4])
def test_no_pages_means_no_links(pages: int) -> None:
    pagination = create_pagination(1, pages)
    assert pagination.links == []
    assert pagination.previous is None
    assert pagination.next is None
    assert pagination.total_pages == 0


def test_window_around_current_page() -> None:
    pagination = create_pagination(10, 20, window=2)

    assert [link.number for link in pagination.links] == [8, 9, 10, 11, 12]
    assert [link.number for link in pagination.links if link.active] == [10]
    assert pagination.previous == "?page=9"
    assert pagination.next == "?page=11"


def test_window_is_clipped_at_both_ends() -> None:
    assert [link.number for link in create_pagination(1, 3, window=5).links] == [1, 2, 3]
    assert create_pagination(1, 3).previous is None
    assert create_pagination(3, 3).next is None


def test_other_query_params_are_kept() -> None:
    pagination = create_pagination(2, 3, {"page": "2", "q": "octo"}, window=0)

    assert pagination.links == [PageLink(number=2, href="?q=octo&page=2", active=True)]
    assert pagination.previous == "?q=octo&page=1"
    assert pagination.next == "?q=octo&page=3"


def test_current_page_past_the_end_is_not_clamped() -> None:
    pagination = create_pagination(9, 3, window=5)

    assert pagination.current == 9
    assert pagination.links == []
    assert pagination.previous is None
    assert pagination.next is None


def test_repeated_query_params_are_all_kept() -> None:
    pagination = create_pagination(
        1, 2, [("tag", "a"), ("page", "1"), ("tag", "b")], window=0
    )

    assert pagination.links[0].href == "?tag=a&tag=b&page=1"
    assert pagination.next == "?tag=a&tag=b&page=2"
