"""Greedy activity selection by earliest finishing time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO


def select_activities(activities: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Pick a largest set of non-overlapping (start, end) activities.

    An activity starting exactly when another ends counts as a conflict.
    """
    ordered = sorted(activities, key=lambda act: (act[1], act[0]))
    schedule: list[tuple[int, int]] = []
    for start, end in ordered:
        if not schedule or start > schedule[-1][1]:
            schedule.append((start, end))
    return schedule


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise EOFError("unexpected end of input")
        values.append(int(token))
    return values


def run_activity_selection(stdin: TextIO, stdout: TextIO) -> list[tuple[int, int]]:
    """Read activities, print the chosen schedule and return it."""
    tokens = _tokens(stdin)
    stdout.write("Enter number of activities: ")
    (count,) = _read_ints(tokens, 1)
    if count < 0:
        raise ValueError("number of activities must not be negative")
    stdout.write("Enter start time of each activies (space-separated): ")
    starts = _read_ints(tokens, count)
    stdout.write("Enter end time of each activies (space-separated): ")
    ends = _read_ints(tokens, count)

    schedule = select_activities(zip(starts, ends))
    stdout.write("Activities: \n")
    for start, end in schedule:
        stdout.write(f"{start}, {end}\n")
    stdout.write(f"No. of activities: {len(schedule)}\n")
    stdout.write("--DONE--\n")
    return schedule