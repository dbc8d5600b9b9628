"""Weighted graphs held as adjacency lists, with text input and output."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Vertex:
    """A named vertex with its outgoing (neighbour, weight) pairs."""

    name: int
    adjacency: list[tuple[int, int]] = field(default_factory=list)


class Graph:
    """A weighted graph whose vertices are named 1..n."""

    def __init__(
        self,
        adj_lists: Iterable[Sequence[tuple[int, int]]] | None = None,
        is_directed: bool = True,
    ) -> None:
        self._vertices: list[Vertex] = []
        self._adj_lists: list[list[tuple[int, int]]] = [
            [(dest, weight) for dest, weight in neighbours]
            for neighbours in (adj_lists or [])
        ]
        for name in range(1, len(self._adj_lists) + 1):
            self.add_vertex(name)
        for src, neighbours in enumerate(self._adj_lists, start=1):
            for dest, weight in neighbours:
                self.connect_vertices(src, dest, weight, is_directed)

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    @property
    def adj_lists(self) -> list[list[tuple[int, int]]]:
        """The adjacency lists the graph was built from."""
        return self._adj_lists

    def add_vertex(self, name: int) -> None:
        self._vertices.append(Vertex(name))

    def _find(self, name: int) -> Vertex | None:
        return next((v for v in reversed(self._vertices) if v.name == name), None)

    def connect_vertices(
        self, src: int, dest: int, weight: int = 1, is_directed: bool = True
    ) -> None:
        """Add an edge; does nothing if either end is missing or both ends coincide."""
        if src == dest:
            return
        src_vertex = self._find(src)
        dest_vertex = self._find(dest)
        if src_vertex is None or dest_vertex is None:
            return
        src_vertex.adjacency.append((dest, weight))
        if not is_directed:
            dest_vertex.adjacency.append((src, weight))

    def format_adj_list(self) -> str:
        lines = ["Source | Dest\n"]
        for vertex in self._vertices:
            pairs = "".join(f"{{{dest}, {weight}}} " for dest, weight in vertex.adjacency)
            lines.append(f"{vertex.name} -> {pairs}\n")
        return "".join(lines)

    def format_adj_matrix(self) -> str:
        header = "".join(f"{v.name} | " for v in self._vertices)
        lines = ["Source (rows) & Dest (cols)\n", f"  | {header}\n"]
        for row in self._vertices:
            cells = []
            for column in self._vertices:
                weight = next(
                    (w for dest, w in row.adjacency if dest == column.name), None
                )
                cells.append("* | " if weight is None else f"{weight} | ")
            lines.append(f"{row.name} | {''.join(cells)}\n")
        return "".join(lines)


def parse_adjacency_line(line: str) -> list[tuple[int, int]]:
    """Parse text such as ``(2, 10)(3, 5)`` into (neighbour, weight) pairs."""
    pairs: list[tuple[int, int]] = []
    while line:
        left = line.find("(")
        right = line.find(")")
        if left == -1 and right == -1:
            break
        if left == -1 or right < left:
            raise ValueError(f"unbalanced parentheses in {line!r}")
        inner = line[left + 1 : right]
        neighbour, comma, weight = inner.partition(",")
        if not comma:
            raise ValueError(f"expected 'neighbour, weight' in {inner!r}")
        try:
            pairs.append((int(neighbour), int(weight)))
        except ValueError as exc:
            raise ValueError(f"invalid number in {inner!r}") from exc
        line = line[:left] + line[right + 1 :]
    return pairs


def create_graph(stdin: TextIO, stdout: TextIO, is_directed: bool = True) -> Graph:
    """Prompt for a graph on ``stdout`` and read it from ``stdin``."""
    stdout.write("Enter number of vertices: ")
    first = stdin.readline()
    if not first:
        raise EOFError("unexpected end of input")
    n_vertices = int(first)
    if n_vertices < 0:
        raise ValueError("number of vertices must not be negative")

    stdout.write(
        "!! Kindly use the form (neighbor, weight) [with parenthesis] !!\n"
        "!! e.g. (2, 10)(3, 5) or (2,10)(3,5) or (2,10)   (3,   5)   "
        "[spaces do not matter] !!\n"
        "!! Enter a newline if the vertex is not connected to other vertices !!\n"
        "!! Moreover, make sure that any of the neighbors are within "
        "[1, n_vertices]. TY!\n\n"
    )

    adj_lists = []
    for node in range(1, n_vertices + 1):
        stdout.write(f"Enter neighbor and weight for node {node}: ")
        adj_lists.append(parse_adjacency_line(stdin.readline().rstrip("\r\n")))
    return Graph(adj_lists, is_directed)