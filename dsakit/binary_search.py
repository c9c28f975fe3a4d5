"""Binary search and its common variants over sorted integer sequences."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        value = arr[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return NOT_FOUND


def binary_search_recursive(
    arr: Sequence[int], target: int, left: int = 0, right: int | None = None
) -> int:
    """Recursive binary search within ``arr[left:right + 1]``."""
    if right is None:
        right = len(arr) - 1
    if left > right:
        return NOT_FOUND
    mid = (left + right) // 2
    if arr[mid] == target:
        return mid
    if arr[mid] < target:
        return binary_search_recursive(arr, target, mid + 1, right)
    return binary_search_recursive(arr, target, left, mid - 1)


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose value is not less than ``target``."""
    left, right = 0, len(arr)
    while left < right:
        mid = (left + right) // 2
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid
    return left


def upper_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose value is greater than ``target``."""
    left, right = 0, len(arr)
    while left < right:
        mid = (left + right) // 2
        if arr[mid] <= target:
            left = mid + 1
        else:
            right = mid
    return left


def _find_edge(arr: Sequence[int], target: int, *, leftmost: bool) -> int:
    left, right = 0, len(arr) - 1
    result = NOT_FOUND
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            result = mid
            if leftmost:
                right = mid - 1
            else:
                left = mid + 1
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return result


def find_first(arr: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return _find_edge(arr, target, leftmost=True)


def find_last(arr: Sequence[int], target: int) -> int:
    """Return the index of the last occurrence of ``target``, or -1."""
    return _find_edge(arr, target, leftmost=False)


def search_range(arr: Sequence[int], target: int) -> tuple[int, int]:
    """Return ``(first, last)`` indices of ``target``, or ``(-1, -1)``."""
    first = find_first(arr, target)
    if first == NOT_FOUND:
        return (NOT_FOUND, NOT_FOUND)
    return (first, find_last(arr, target))


def search_rotated(arr: Sequence[int], target: int) -> int:
    """Search a rotated sorted sequence of distinct values."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[left] <= arr[mid]:
            if arr[left] <= target < arr[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if arr[mid] < target <= arr[right]:
                left = mid + 1
            else:
                right = mid - 1
    return NOT_FOUND


def find_peak_element(arr: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours."""
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if arr[mid] > arr[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def int_sqrt(x: int) -> int:
    """Return the floor of the square root of ``x``."""
    if x < 2:
        return x
    left, right = 1, x // 2
    while left <= right:
        mid = (left + right) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            left = mid + 1
        else:
            right = mid - 1
    return right


def search_insert(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` or where it would be inserted."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of the binary search variants."""
    sorted_array = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19]
    duplicate_array = [1, 2, 2, 2, 3, 4, 5]
    rotated_array = [4, 5, 6, 7, 0, 1, 2]
    peak_array = [1, 2, 3, 1]

    print("=== Binary Search Demonstrations ===")

    print("1. Standard Binary Search:")
    print(f"Array: {sorted_array}")
    target = 7
    print(f"Searching for {target}: Index = {binary_search(sorted_array, target)}")
    print(
        f"Recursive search for {target}: Index = "
        f"{binary_search_recursive(sorted_array, target)}\n"
    )

    print("2. Lower and Upper Bound:")
    print(f"Array: {duplicate_array}")
    target = 2
    print(
        f"Target {target}: Lower Bound = {lower_bound(duplicate_array, target)}, "
        f"Upper Bound = {upper_bound(duplicate_array, target)}\n"
    )

    print("3. First and Last Occurrence:")
    print(f"Array: {duplicate_array}")
    first, last = search_range(duplicate_array, target)
    print(f"Range of {target}: [{first}, {last}]\n")

    print("4. Search in Rotated Sorted Array:")
    print(f"Array: {rotated_array}")
    target = 0
    print(f"Searching for {target}: Index = {search_rotated(rotated_array, target)}\n")

    print("5. Find Peak Element:")
    print(f"Array: {peak_array}")
    peak = find_peak_element(peak_array)
    print(f"Peak element at index {peak}: value = {peak_array[peak]}\n")

    print("6. Square Root using Binary Search:")
    x = 8
    print(f"Square root of {x}: {int_sqrt(x)}\n")

    print("7. Search Insert Position:")
    print(f"Array: {sorted_array}")
    target = 6
    print(f"Insert position for {target}: {search_insert(sorted_array, target)}")

    print("\n=== Edge Cases ===")
    print(f"Search in empty array: {binary_search([], 5)}")
    print(f"Search 5 in [5]: {binary_search([5], 5)}")
    print(f"Search 3 in [5]: {binary_search([5], 3)}")
    print(f"Search 100 in {sorted_array}: {binary_search(sorted_array, 100)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())