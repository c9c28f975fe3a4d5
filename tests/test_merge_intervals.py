import pytest

from dsakit.merge_intervals import (
    Interval,
    can_attend_meetings,
    insert_interval,
    interval_intersection,
    main,
    merge_intervals,
    min_meeting_rooms,
    remove_covered_intervals,
)

DEMO = [Interval(1, 3), Interval(2, 6), Interval(8, 10), Interval(15, 18)]
LIST1 = [Interval(0, 2), Interval(5, 10), Interval(13, 23), Interval(24, 25)]
LIST2 = [Interval(1, 5), Interval(8, 12), Interval(15, 24), Interval(25, 26)]
COVERED = [Interval(1, 4), Interval(3, 6), Interval(2, 8)]


def _points(intervals):
    return {p for iv in intervals for p in range(iv.start, iv.end + 1)}


def test_merge_demo_example():
    assert merge_intervals(DEMO) == [
        Interval(1, 6),
        Interval(8, 10),
        Interval(15, 18),
    ]


@pytest.mark.parametrize(
    "intervals",
    [
        DEMO,
        list(reversed(DEMO)),
        [Interval(5, 7), Interval(1, 2), Interval(3, 4)],
        [Interval(1, 10), Interval(2, 3), Interval(4, 5)],
    ],
)
def test_merge_result_is_sorted_disjoint_and_covers_input(intervals):
    merged = merge_intervals(intervals)
    for previous, current in zip(merged, merged[1:]):
        assert previous.end < current.start
    assert _points(merged) == _points(intervals)


def test_merge_does_not_mutate_input_and_handles_small_lists():
    original = list(reversed(DEMO))
    snapshot = list(original)
    merge_intervals(original)
    assert original == snapshot
    assert merge_intervals([]) == []
    assert merge_intervals([Interval(4, 9)]) == [Interval(4, 9)]


def test_insert_demo_example():
    result = insert_interval([Interval(1, 3), Interval(6, 9)], Interval(2, 5))
    assert result == [Interval(1, 5), Interval(6, 9)]


def test_insert_matches_merging_with_new_interval():
    existing = merge_intervals(DEMO)
    for new in [Interval(0, 0), Interval(7, 16), Interval(11, 12), Interval(20, 30)]:
        assert insert_interval(existing, new) == merge_intervals([*existing, new])


def test_insert_into_empty():
    assert insert_interval([], Interval(2, 5)) == [Interval(2, 5)]


def test_can_attend_meetings():
    assert can_attend_meetings([Interval(0, 30), Interval(5, 10), Interval(15, 20)]) is False
    assert can_attend_meetings([Interval(7, 10), Interval(2, 4)]) is True
    assert can_attend_meetings([]) is True


def test_min_meeting_rooms_demo():
    assert min_meeting_rooms([Interval(0, 30), Interval(5, 10), Interval(15, 20)]) == 2


def test_min_meeting_rooms_invariants():
    assert min_meeting_rooms([]) == 0
    disjoint = [Interval(7, 10), Interval(2, 4)]
    assert min_meeting_rooms(disjoint) == 1
    stacked = [Interval(1, 10)] * 4
    assert min_meeting_rooms(stacked) == len(stacked)


def test_intersection_is_symmetric_and_contained():
    forward = interval_intersection(LIST1, LIST2)
    backward = interval_intersection(LIST2, LIST1)
    assert forward == backward
    assert _points(forward) == _points(LIST1) & _points(LIST2)


def test_intersection_with_empty_list():
    assert interval_intersection(LIST1, []) == []


def test_remove_covered_intervals_invariants():
    result = remove_covered_intervals(COVERED)
    for a in result:
        for b in result:
            if a is not b:
                assert not (b.start <= a.start and a.end <= b.end)
    for iv in COVERED:
        assert any(r.start <= iv.start and iv.end <= r.end for r in result)
    assert len(result) < len(COVERED)


def test_remove_covered_keeps_independent_intervals():
    intervals = [Interval(1, 2), Interval(3, 4)]
    assert remove_covered_intervals(intervals) == intervals


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== BASIC MERGE INTERVALS ===" in out
    assert "All demonstrations completed!" in out