"""Fixed-size sliding window computations over integer sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _window_sums(arr: Sequence[int], k: int) -> Iterator[int]:
    """Yield the sum of every run of ``k`` consecutive values."""
    window = sum(arr[:k])
    yield window
    for outgoing, incoming in zip(arr, arr[k:]):
        window += incoming - outgoing
        yield window


def max_sum_fixed_window(arr: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values, or -1 if ``arr`` is too short."""
    if k < 0:
        raise ValueError("window size must not be negative")
    if len(arr) < k:
        return -1
    return max(_window_sums(arr, k))


def avg_of_subarrays(arr: Sequence[int], k: int) -> list[float]:
    """Return the mean of every run of ``k`` consecutive values; empty if too short."""
    if k <= 0:
        raise ValueError("window size must be positive")
    if len(arr) < k:
        return []
    return [window / k for window in _window_sums(arr, k)]


def demo_fixed_window() -> None:
    """Print a demonstration of the fixed-size window routines."""
    print("=== FIXED SIZE SLIDING WINDOW EXAMPLES ===")

    arr = [2, 1, 5, 1, 3, 2]
    k = 3
    print(f"Max sum of subarray of size {k} in {arr}: {max_sum_fixed_window(arr, k)}")

    arr2 = [1, 3, 2, 6, -1, 4, 1, 8, 2]
    k2 = 5
    averages = " ".join(f"{value:.2f}" for value in avg_of_subarrays(arr2, k2))
    print(f"Averages of subarrays of size {k2}: [{averages}]")
    print()