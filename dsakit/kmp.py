"""Knuth-Morris-Pratt string matching."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def compute_lps_array(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-which-is-also-suffix table."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _iter_matches(text: str, pattern: str) -> Iterator[int]:
    if not pattern or not text:
        return
    lps = compute_lps_array(pattern)
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            yield i - j
            j = lps[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start indices of every occurrence of ``pattern``."""
    return list(_iter_matches(text, pattern))


def kmp_search_first(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern``, or -1."""
    return next(_iter_matches(text, pattern), -1)


def kmp_count(text: str, pattern: str) -> int:
    """Return how many times ``pattern`` occurs in ``text``."""
    return sum(1 for _ in _iter_matches(text, pattern))


def kmp_search_with_overlap(text: str, pattern: str) -> list[int]:
    """Return all start indices, overlapping occurrences included."""
    return list(_iter_matches(text, pattern))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of KMP searching."""
    print("=== KMP (Knuth-Morris-Pratt) Algorithm Demonstrations ===\n")

    text, pattern = "AABAACAADAABAAABAA", "AABA"
    print(f"Text: {text}\nPattern: {pattern}")
    print(f"Prefix Table (LPS): {compute_lps_array(pattern)}")
    print(f"All matches found at indices: {kmp_search(text, pattern)}\n")

    text2, pattern2 = "ABABDABACDABABCABAB", "ABABCABAB"
    print(f"Text: {text2}\nPattern: {pattern2}")
    print(f"First match found at index: {kmp_search_first(text2, pattern2)}\n")

    text3, pattern3 = "AAAAA", "AA"
    print(f"Text: {text3}\nPattern: {pattern3}")
    print(f"Non-overlapping matches at indices: {kmp_search(text3, pattern3)}")
    print(f"Overlapping matches at indices: {kmp_search_with_overlap(text3, pattern3)}\n")

    text4, pattern4 = "AAAAABAAABA", "AA"
    print(f"Text: {text4}\nPattern: {pattern4}")
    print(f"Pattern occurs {kmp_count(text4, pattern4)} times\n")

    print("Edge Cases:")
    print(f"Empty text search: {kmp_search('', 'ABC')}")
    print(f"Empty pattern search: {kmp_search('ABC', '')}")
    print(f"Pattern longer than text: {kmp_search_first('AB', 'ABC')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())