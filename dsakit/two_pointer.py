"""Two-pointer techniques: converging and fast/slow pointers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices of a pair in sorted ``nums`` summing to ``target``, or (-1, -1)."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return (left, right)
        if total < target:
            left += 1
        else:
            right -= 1
    return (-1, -1)


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same forwards and backwards."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return False
        left += 1
        right -= 1
    return True


def reverse_array(arr: MutableSequence[int]) -> None:
    """Reverse ``arr`` in place."""
    left, right = 0, len(arr) - 1
    while left < right:
        arr[left], arr[right] = arr[right], arr[left]
        left += 1
        right -= 1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place; return the count of unique values."""
    if not nums:
        return 0
    slow = 0
    for fast in range(1, len(nums)):
        if nums[fast] != nums[slow]:
            slow += 1
            nums[slow] = nums[fast]
    return slow + 1


def max_sum_subarray(arr: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values, or -1 if too short."""
    if k < 0:
        raise ValueError("window size must not be negative")
    if len(arr) < k:
        return -1
    window = sum(arr[:k])
    best = window
    for outgoing, incoming in zip(arr, arr[k:]):
        window += incoming - outgoing
        best = max(best, window)
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of the two-pointer techniques."""
    print("=== ALGORITHM DEMONSTRATIONS ===\n")
    print("🔹 TWO POINTER ALGORITHMS:")
    print("1. OPPOSITE DIRECTION (Convergent) Pointers:")
    print("   - Pointers start at opposite ends and move toward each other\n")

    print("=== OPPOSITE DIRECTION (Convergent) EXAMPLES ===")
    nums = [2, 7, 11, 15]
    target = 9
    print(f"Two Sum: indices {list(two_sum(nums, target))} sum to {target}")
    word = "racecar"
    print(f"'{word}' is palindrome: {str(is_palindrome(word)).lower()}")
    arr = [1, 2, 3, 4, 5]
    print(f"Original: {arr}")
    reverse_array(arr)
    print(f"Reversed: {arr}")
    print()

    print("2. SAME DIRECTION (Fast-Slow) Pointers:")
    print("   - Both pointers move in the same direction at different speeds\n")
    print("=== SAME DIRECTION (Sliding Window) EXAMPLES ===")
    dupes = [1, 1, 2, 2, 3, 4, 4, 5]
    print(f"Original: {dupes}")
    length = remove_duplicates(dupes)
    print(f"After removing duplicates: {dupes[:length]} (length: {length})")
    window_arr = [1, 2, 3, 4, 5]
    k = 3
    print(f"Max sum of subarray of size {k}: {max_sum_subarray(window_arr, k)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())