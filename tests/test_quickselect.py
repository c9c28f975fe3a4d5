import random

import pytest

from dsakit.quickselect import main, median_of_medians, quick_select

SAMPLES = [
    [7, 10, 4, 3, 20, 15],
    [12, 3, 5, 7, 4, 19, 26],
    [1],
    [3, 3, 3, 3, 3, 3, 3],
    [5, -2, 9, 0, 0, 14, -7, 3, 8, 1, 1, 22, -5],
]


@pytest.mark.parametrize("select", [quick_select, median_of_medians])
@pytest.mark.parametrize("arr", SAMPLES)
def test_every_rank_matches_sorted_order(select, arr):
    expected = sorted(arr)
    for k in range(len(arr)):
        assert select(arr, k) == expected[k]


@pytest.mark.parametrize("select", [quick_select, median_of_medians])
def test_random_large_inputs(select):
    rng = random.Random(1234)
    for _ in range(20):
        arr = [rng.randint(-50, 50) for _ in range(rng.randint(1, 80))]
        k = rng.randrange(len(arr))
        assert select(arr, k) == sorted(arr)[k]


@pytest.mark.parametrize("select", [quick_select, median_of_medians])
def test_many_duplicates_large(select):
    arr = [4] * 500 + [1] * 300
    assert select(arr, 299) == 1
    assert select(arr, 300) == 4


@pytest.mark.parametrize("select", [quick_select, median_of_medians])
def test_input_not_mutated(select):
    arr = [9, 1, 8, 2, 7, 3, 6, 4, 5, 0, 11]
    snapshot = list(arr)
    select(arr, 5)
    assert arr == snapshot


@pytest.mark.parametrize("select", [quick_select, median_of_medians])
@pytest.mark.parametrize("arr,k", [([1, 2, 3], -1), ([1, 2, 3], 3), ([], 0)])
def test_out_of_bounds_raises(select, arr, k):
    with pytest.raises(IndexError, match="k is out of bounds"):
        select(arr, k)


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Quickselect Algorithm Demonstrations ===" in out
    assert "Array with duplicates: [3, 3, 3, 3, 3, 3, 3]" in out