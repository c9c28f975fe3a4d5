"""Interval merging, insertion, meeting-room and intersection problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """A closed interval from ``start`` to ``end``."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


def _format(intervals: Iterable[Interval]) -> str:
    return "[" + ", ".join(str(interval) for interval in intervals) + "]"


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Return the intervals sorted by start with overlapping ones merged."""
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if len(ordered) <= 1:
        return ordered
    merged = [ordered[0]]
    for current in ordered[1:]:
        last = merged[-1]
        if current.start <= last.end:
            if current.end > last.end:
                merged[-1] = Interval(last.start, current.end)
        else:
            merged.append(current)
    return merged


def insert_interval(
    intervals: Sequence[Interval], new_interval: Interval
) -> list[Interval]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals`` and merge."""
    result: list[Interval] = []
    start, end = new_interval.start, new_interval.end
    remaining = iter(intervals)
    pending: Interval | None = None

    for interval in remaining:
        if interval.end < start:
            result.append(interval)
            continue
        pending = interval
        break

    while pending is not None and pending.start <= end:
        start = min(start, pending.start)
        end = max(end, pending.end)
        pending = next(remaining, None)

    result.append(Interval(start, end))
    if pending is not None:
        result.append(pending)
    result.extend(remaining)
    return result


def can_attend_meetings(intervals: Iterable[Interval]) -> bool:
    """Return whether no two meetings overlap."""
    ordered = sorted(intervals, key=lambda interval: interval.start)
    return all(
        current.start >= previous.end
        for previous, current in zip(ordered, ordered[1:])
    )


def min_meeting_rooms(intervals: Iterable[Interval]) -> int:
    """Return the least number of rooms that hold all meetings at once."""
    intervals = list(intervals)
    if not intervals:
        return 0
    starts = sorted(interval.start for interval in intervals)
    ends = sorted(interval.end for interval in intervals)

    rooms = max_rooms = 0
    start_ptr = end_ptr = 0
    while start_ptr < len(starts):
        if starts[start_ptr] < ends[end_ptr]:
            rooms += 1
            start_ptr += 1
        else:
            rooms -= 1
            end_ptr += 1
        max_rooms = max(max_rooms, rooms)
    return max_rooms


def interval_intersection(
    list1: Sequence[Interval], list2: Sequence[Interval]
) -> list[Interval]:
    """Return the intersection of two sorted lists of disjoint intervals."""
    result: list[Interval] = []
    i = j = 0
    while i < len(list1) and j < len(list2):
        first, second = list1[i], list2[j]
        start = max(first.start, second.start)
        end = min(first.end, second.end)
        if start <= end:
            result.append(Interval(start, end))
        if first.end < second.end:
            i += 1
        else:
            j += 1
    return result


def remove_covered_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Drop every interval that lies within another one."""
    ordered = sorted(intervals, key=lambda interval: (interval.start, -interval.end))
    if len(ordered) <= 1:
        return ordered
    result: list[Interval] = []
    for current in ordered:
        if not result or current.end > result[-1].end:
            result.append(current)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of the interval algorithms."""
    print("🎯 DSA ALGORITHMS DEMONSTRATION")
    print("=" * 40)
    print("\n📅 MERGE INTERVALS ALGORITHM")

    print("=== BASIC MERGE INTERVALS ===")
    intervals = [Interval(1, 3), Interval(2, 6), Interval(8, 10), Interval(15, 18)]
    print(f"Input intervals: {_format(intervals)}")
    print(f"Merged intervals: {_format(merge_intervals(intervals))}\n")

    print("=== INSERT INTERVAL ===")
    existing = [Interval(1, 3), Interval(6, 9)]
    new_interval = Interval(2, 5)
    print(f"Existing intervals: {_format(existing)}")
    print(f"New interval: {new_interval}")
    print(f"After insertion: {_format(insert_interval(existing, new_interval))}\n")

    print("=== MEETING ROOMS PROBLEMS ===")
    meetings1 = [Interval(0, 30), Interval(5, 10), Interval(15, 20)]
    meetings2 = [Interval(7, 10), Interval(2, 4)]
    print(f"Meetings 1: {_format(meetings1)}")
    print(f"Can attend all: {str(can_attend_meetings(meetings1)).lower()}")
    print(f"Meetings 2: {_format(meetings2)}")
    print(f"Can attend all: {str(can_attend_meetings(meetings2)).lower()}")
    meetings3 = [Interval(0, 30), Interval(5, 10), Interval(15, 20)]
    print(f"Meetings 3: {_format(meetings3)}")
    print(f"Minimum rooms needed: {min_meeting_rooms(meetings3)}\n")

    print("=== INTERVAL OPERATIONS ===")
    list1 = [Interval(0, 2), Interval(5, 10), Interval(13, 23), Interval(24, 25)]
    list2 = [Interval(1, 5), Interval(8, 12), Interval(15, 24), Interval(25, 26)]
    print(f"List 1: {_format(list1)}")
    print(f"List 2: {_format(list2)}")
    print(f"Intersection: {_format(interval_intersection(list1, list2))}")
    covered = [Interval(1, 4), Interval(3, 6), Interval(2, 8)]
    print(f"Intervals with coverage: {_format(covered)}")
    print(f"After removing covered: {_format(remove_covered_intervals(covered))}\n")

    print("✅ All demonstrations completed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())