import pytest

from dsakit.binary_search import (
    binary_search,
    binary_search_recursive,
    find_first,
    find_last,
    find_peak_element,
    int_sqrt,
    lower_bound,
    main,
    search_insert,
    search_range,
    search_rotated,
    upper_bound,
)


@pytest.mark.parametrize(
    "target, expected",
    [(7, 3), (1, 0), (13, 6), (4, -1), (15, -1), (0, -1)],
)
def test_binary_search(target, expected):
    assert binary_search([1, 3, 5, 7, 9, 11, 13], target) == expected


def test_binary_search_empty():
    assert binary_search([], 5) == -1


@pytest.mark.parametrize(
    "target, expected",
    [(6, 2), (2, 0), (10, 4), (5, -1), (12, -1)],
)
def test_binary_search_recursive(target, expected):
    arr = [2, 4, 6, 8, 10]
    assert binary_search_recursive(arr, target, 0, len(arr) - 1) == expected
    assert binary_search_recursive(arr, target) == expected


@pytest.mark.parametrize(
    "target, expected",
    [(2, 1), (3, 4), (0, 0), (6, 7), (2, 1)],
)
def test_lower_bound(target, expected):
    assert lower_bound([1, 2, 2, 2, 3, 4, 5], target) == expected


@pytest.mark.parametrize(
    "target, expected",
    [(2, 4), (3, 5), (0, 0), (6, 7), (1, 1)],
)
def test_upper_bound(target, expected):
    assert upper_bound([1, 2, 2, 2, 3, 4, 5], target) == expected


@pytest.mark.parametrize(
    "target, expected",
    [(8, (3, 4)), (7, (1, 2)), (5, (0, 0)), (6, (-1, -1)), (10, (5, 5))],
)
def test_search_range(target, expected):
    assert search_range([5, 7, 7, 8, 8, 10], target) == expected


def test_find_first_and_last():
    arr = [5, 7, 7, 8, 8, 10]
    assert find_first(arr, 8) == 3
    assert find_last(arr, 8) == 4
    assert find_first(arr, 6) == -1
    assert find_last(arr, 6) == -1


@pytest.mark.parametrize(
    "target, expected",
    [(0, 4), (3, -1), (4, 0), (2, 6), (7, 3), (1, 5)],
)
def test_search_rotated(target, expected):
    assert search_rotated([4, 5, 6, 7, 0, 1, 2], target) == expected


@pytest.mark.parametrize(
    "arr",
    [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [1], [1, 2], [2, 1]],
)
def test_find_peak_element(arr):
    result = find_peak_element(arr)
    if len(arr) == 1:
        assert result == 0
    elif result == 0:
        assert arr[0] > arr[1]
    elif result == len(arr) - 1:
        assert arr[result] > arr[result - 1]
    else:
        assert arr[result] > arr[result - 1]
        assert arr[result] > arr[result + 1]


@pytest.mark.parametrize(
    "x, expected",
    [(4, 2), (8, 2), (9, 3), (16, 4), (1, 1), (0, 0), (2, 1), (15, 3)],
)
def test_int_sqrt(x, expected):
    assert int_sqrt(x) == expected


@pytest.mark.parametrize(
    "target, expected",
    [(5, 2), (2, 1), (7, 4), (0, 0), (4, 2)],
)
def test_search_insert(target, expected):
    assert search_insert([1, 3, 5, 6], target) == expected


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Searching for 7: Index = 3" in out
    assert "Square root of 8: 2" in out