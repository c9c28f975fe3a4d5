"""Selection of the k-th smallest value: quickselect and median of medians."""

from __future__ import annotations

from collections.abc import Sequence


def _check_k(arr: Sequence[int], k: int) -> None:
    if k < 0 or k >= len(arr):
        raise IndexError("k is out of bounds")


def _partition(arr: list[int], left: int, right: int) -> int:
    """Lomuto partition around ``arr[right]``; return the pivot's final index."""
    pivot = arr[right]
    i = left - 1
    for j in range(left, right):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[right] = arr[right], arr[i + 1]
    return i + 1


def _partition_around_value(arr: list[int], left: int, right: int, value: int) -> int:
    for i in range(left, right + 1):
        if arr[i] == value:
            arr[i], arr[right] = arr[right], arr[i]
            break
    return _partition(arr, left, right)


def _select(arr: list[int], left: int, right: int, k: int) -> int:
    while left != right:
        pivot = _partition(arr, left, right)
        if k == pivot:
            return arr[k]
        if k < pivot:
            right = pivot - 1
        else:
            left = pivot + 1
    return arr[left]


def quick_select(arr: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (0-based) of ``arr``.

    Raises IndexError when ``k`` is outside ``arr``.
    """
    _check_k(arr, k)
    work = list(arr)
    return _select(work, 0, len(work) - 1, k)


def median_of_medians(arr: Sequence[int], k: int) -> int:
    """Return the k-th smallest value using median-of-medians pivots.

    Raises IndexError when ``k`` is outside ``arr``.
    """
    _check_k(arr, k)
    work = list(arr)
    left, right = 0, len(work) - 1
    while right - left + 1 > 5:
        medians = []
        for group_start in range(left, left + (right - left + 1) // 5 * 5, 5):
            group = sorted(work[group_start:group_start + 5])
            work[group_start:group_start + 5] = group
            medians.append(group[len(group) // 2])
        pivot_value = median_of_medians(medians, len(medians) // 2)
        pivot = _partition_around_value(work, left, right, pivot_value)
        if k == pivot:
            return work[k]
        if k < pivot:
            right = pivot - 1
        else:
            left = pivot + 1
    return _select(work, left, right, k)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of quickselect."""
    print("=== Quickselect Algorithm Demonstrations ===\n")

    arr1 = [7, 10, 4, 3, 20, 15]
    k = 3
    print(f"Array: {arr1}")
    print(f"Finding {k + 1}th smallest element (k={k})")
    print(f"Result: {quick_select(arr1, k)}\n")

    arr2 = [12, 3, 5, 7, 4, 19, 26]
    median_index = len(arr2) // 2
    print(f"Array: {arr2}")
    print(f"Finding median (k={median_index})")
    print(f"Median: {quick_select(arr2, median_index)}\n")

    arr4 = [1]
    print(f"Single element array: {arr4}")
    print("Finding smallest element (k=0)")
    print(f"Result: {quick_select(arr4, 0)}\n")

    arr5 = [3, 3, 3, 3, 3, 3, 3]
    k = 3
    print(f"Array with duplicates: {arr5}")
    print(f"Finding {k + 1}th element (k={k})")
    print(f"Result: {quick_select(arr5, k)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())