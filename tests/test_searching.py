import pytest

from estudos.searching import binary_search, linear_search

DIGITS = list(range(10))


@pytest.mark.parametrize(
    "items, value, expected",
    [
        (DIGITS, 0, 0),
        (DIGITS, 9, 9),
        (DIGITS, 10, -1),
        ([0], 0, 0),
        ([0, 1], 1, 1),
        ([0, 1], 69, -1),
        ([0, 1, 2], 1, 1),
        ([], 3, -1),
    ],
)
def test_binary_search(items, value, expected):
    assert binary_search(items, value) == expected


@pytest.mark.parametrize(
    "items, value, expected",
    [
        (DIGITS, 0, 0),
        (DIGITS, 9, 9),
        (DIGITS, 10, -1),
        ([28, 30, 1, 69, 420, 24, 32, 44, 31], 69, 3),
        ([], 1, -1),
    ],
)
def test_linear_search(items, value, expected):
    assert linear_search(items, value) == expected


def test_binary_search_finds_every_element():
    items = list(range(0, 200, 3))
    for index, value in enumerate(items):
        assert binary_search(items, value) == index
        assert binary_search(items, value + 1) == -1