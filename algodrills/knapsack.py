"""0/1 and fractional knapsack solvers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Callable, TextIO, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class Item:
    """An item with a value, an integer weight and a 1-based identifier."""

    value: float
    weight: int
    identifier: int = 0


def knapsack_01_table(items: Iterable[Item], capacity: int) -> list[list[int]]:
    """Build the bottom-up table of best values for every item prefix and capacity.

    Row ``i`` covers the first ``i`` items and column ``j`` a bag of capacity ``j``.
    Values are truncated to integers as they are stored.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    table = [[0] * (capacity + 1)]
    for item in items:
        if item.weight < 0:
            raise ValueError(f"item {item.identifier} has a negative weight")
        previous = table[-1]
        row = [0]
        for cap in range(1, capacity + 1):
            taken = 0
            if item.weight <= cap:
                taken = int(item.value + previous[cap - item.weight])
            row.append(max(taken, previous[cap]))
        table.append(row)
    return table


def chosen_items(table: Sequence[Sequence[int]], items: Sequence[Item]) -> list[int]:
    """Trace a table back to the 1-based numbers of the chosen items, last first."""
    if len(table) != len(items) + 1:
        raise ValueError("table does not match the number of items")
    picks: list[int] = []
    row = len(table) - 1
    column = len(table[0]) - 1
    while row > 0:
        if table[row][column] != table[row - 1][column]:
            picks.append(row)
            column -= items[row - 1].weight
        row -= 1
    return picks


def fractional_knapsack(items: Iterable[Item], capacity: int) -> list[Item]:
    """Fill the bag greedily by value per weight, splitting the last item.

    Each returned item carries the weight taken and the value that weight brings.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = list(items)
    for item in items:
        if item.weight <= 0:
            raise ValueError(f"item {item.identifier} must have a positive weight")

    ranked = sorted(items, key=lambda it: it.value / it.weight, reverse=True)
    taken: list[Item] = []
    remaining = capacity
    for item in ranked:
        ratio = item.value / item.weight
        if remaining >= item.weight:
            taken.append(Item(ratio * item.weight, item.weight, item.identifier))
            remaining -= item.weight
        else:
            if remaining > 0:
                taken.append(Item(ratio * remaining, remaining, item.identifier))
            break
    return taken


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str], count: int, convert: Callable[[str], _T]) -> list[_T]:
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise EOFError("unexpected end of input")
        values.append(convert(token))
    return values


def _read_items(stdin: TextIO, stdout: TextIO) -> tuple[list[Item], int]:
    tokens = _tokens(stdin)
    stdout.write("Enter capacity of knapsack: ")
    (capacity,) = _read(tokens, 1, int)
    stdout.write("Enter number of items: ")
    (count,) = _read(tokens, 1, int)
    if count < 0:
        raise ValueError("number of items must not be negative")
    stdout.write("Enter value of each item (space-separated): ")
    values = _read(tokens, count, float)
    stdout.write("Enter weight of each item (space-separated): ")
    weights = _read(tokens, count, int)
    items = [
        Item(value, weight, number)
        for number, (value, weight) in enumerate(zip(values, weights), start=1)
    ]
    return items, capacity


def run_knapsack_01(stdin: TextIO, stdout: TextIO) -> tuple[int, list[int]]:
    """Read a 0/1 knapsack problem, print the best value and chosen items."""
    items, capacity = _read_items(stdin, stdout)
    table = knapsack_01_table(items, capacity)
    best = table[-1][-1]
    picks = chosen_items(table, items)

    stdout.write(f"Maximum value: {best}\n")
    stdout.write("Items included are: \n")
    for number in picks:
        stdout.write(f"Item #{number}\n")
    stdout.write("--DONE--\n")
    return best, picks


def run_fractional_knapsack(stdin: TextIO, stdout: TextIO) -> list[Item]:
    """Read a fractional knapsack problem, print what goes in the bag."""
    items, capacity = _read_items(stdin, stdout)
    taken = fractional_knapsack(items, capacity)

    stdout.write("Items included are: \n")
    for item in taken:
        stdout.write(f"{item.weight} kg of Item #{item.identifier}\n")
    total_value = sum(item.value for item in taken)
    total_weight = sum(item.weight for item in taken)
    stdout.write(f"Maximum value: {total_value:g}\n")
    stdout.write(f"Weight of items: {total_weight}\n")
    stdout.write("--DONE--\n")
    return taken