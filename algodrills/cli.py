"""Interactive menu that runs one of the algorithm drills."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from algodrills.activity import run_activity_selection
from algodrills.knapsack import run_fractional_knapsack, run_knapsack_01
from algodrills.kruskal import run_kruskal
from algodrills.rod_cutting import run_rod_cutting

MENU = (
    "Choose which problem to do: \n"
    "(0) Activity Selection\n"
    "(1) 0/1 Knapsack\n"
    "(2) Fractional Knapsack\n"
    "(3) Kruskal Algorithm\n"
    "(4) Rod Cutting Problem\n"
    "Choice: "
)

_PROBLEMS: dict[int, Callable[[TextIO, TextIO], Any]] = {
    0: run_activity_selection,
    1: run_knapsack_01,
    2: run_fractional_knapsack,
    3: run_kruskal,
    4: run_rod_cutting,
}


def _next_token(stream: TextIO) -> str | None:
    for line in iter(stream.readline, ""):
        tokens = line.split()
        if tokens:
            return tokens[0]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Show the menu until a valid choice is made, then run that problem."""
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Run an interactive greedy or dynamic-programming drill.",
    )
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    while True:
        stdout.write(MENU)
        stdout.flush()
        token = _next_token(stdin)
        if token is None:
            print("error: unexpected end of input", file=sys.stderr)
            return 1
        try:
            problem = _PROBLEMS[int(token)]
        except (ValueError, KeyError):
            stdout.write("You chose none of the choices!\n")
            continue
        try:
            problem(stdin, stdout)
        except (ValueError, EOFError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        return 0


if __name__ == "__main__":
    sys.exit(main())