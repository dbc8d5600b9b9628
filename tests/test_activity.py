import io

import pytest

from algodrills.activity import run_activity_selection, select_activities


def _non_overlapping(schedule):
    return all(b[0] > a[1] for a, b in zip(schedule, schedule[1:]))


def test_classic_example():
    acts = [(1, 2), (3, 4), (0, 6), (5, 7), (8, 9), (5, 9)]
    assert select_activities(acts) == [(1, 2), (3, 4), (5, 7), (8, 9)]


def test_touching_counts_as_conflict():
    assert select_activities([(2, 3), (1, 2)]) == [(1, 2)]


def test_empty():
    assert select_activities([]) == []


def test_schedule_is_subset_and_non_overlapping():
    acts = [(0, 5), (1, 3), (4, 8), (2, 9), (9, 12), (6, 7)]
    schedule = select_activities(acts)
    assert set(schedule) <= set(acts)
    assert _non_overlapping(schedule)
    ends = [end for _, end in schedule]
    assert ends == sorted(ends)


def test_single_activity():
    assert select_activities([(4, 6)]) == [(4, 6)]


def test_run_prints_schedule():
    out = io.StringIO()
    schedule = run_activity_selection(io.StringIO("3\n1 3 0\n2 4 6\n"), out)
    assert schedule == [(1, 2), (3, 4)]
    text = out.getvalue()
    assert "Activities: \n1, 2\n3, 4\n" in text
    assert text.endswith(f"No. of activities: {len(schedule)}\n--DONE--\n")


def test_run_short_input():
    with pytest.raises(EOFError):
        run_activity_selection(io.StringIO("3\n1 2\n"), io.StringIO())


def test_run_bad_number():
    with pytest.raises(ValueError):
        run_activity_selection(io.StringIO("two\n"), io.StringIO())