"""Rod cutting by bottom-up dynamic programming."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TextIO


def rod_cutting(prices: Sequence[int], length: int) -> tuple[list[int], list[int]]:
    """Return the best price for every length up to ``length`` and the first cut.

    ``prices[k]`` is the price of a piece of length ``k + 1``. In the second list,
    entry ``i`` is the length of the first piece of the best cut of length ``i``,
    or 0 when no cut brings anything.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(prices) < length:
        raise ValueError(f"need {length} prices, got {len(prices)}")
    table = [0] * (length + 1)
    solution = [0] * (length + 1)
    for i in range(1, length + 1):
        for j in range(1, i + 1):
            value = prices[j - 1] + table[i - j]
            if value > table[i]:
                table[i] = value
                solution[i] = j
    return table, solution


def cut_pieces(solution: Sequence[int], length: int) -> list[int]:
    """Follow the first-cut list to the piece lengths of a rod of ``length``."""
    if not 0 <= length < len(solution):
        raise ValueError(f"length {length} is outside the solution table")
    pieces: list[int] = []
    while length > 0 and solution[length] > 0:
        pieces.append(solution[length])
        length -= solution[length]
    return pieces


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def run_rod_cutting(stdin: TextIO, stdout: TextIO) -> tuple[int, list[int]]:
    """Read a rod length and its prices, print the best value and the cuts."""
    tokens = _tokens(stdin)
    stdout.write("Enter length of rod: ")
    length = _next_int(tokens)
    if length < 0:
        raise ValueError("length must not be negative")
    stdout.write("Enter prices per (integer) length of rod: ")
    prices = [_next_int(tokens) for _ in range(length)]

    table, solution = rod_cutting(prices, length)
    pieces = cut_pieces(solution, length)
    stdout.write(f"Maximum value: {table[-1]}\n")
    stdout.write("Rod should be cut into: " + "".join(f"{p} " for p in pieces) + "\n")
    return table[-1], pieces