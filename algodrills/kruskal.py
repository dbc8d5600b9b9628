"""Minimum spanning trees by Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from algodrills.graph import Vertex, create_graph


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``src`` to ``dest``."""

    weight: int
    src: int
    dest: int


def edges_from_adjacency(adj_lists: Iterable[Sequence[tuple[int, int]]]) -> list[Edge]:
    """List every edge of adjacency lists whose sources are named 1..n."""
    return [
        Edge(weight, src, dest)
        for src, neighbours in enumerate(adj_lists, start=1)
        for dest, weight in neighbours
    ]


def kruskal(edges: Iterable[Edge], vertices: Sequence[Vertex]) -> list[Edge]:
    """Return the edges of a minimum spanning tree (or forest), lightest first."""
    roots = {vertex.name: vertex.name for vertex in vertices}

    def find(name: int) -> int:
        if name not in roots:
            raise ValueError(f"edge refers to unknown vertex {name}")
        while roots[name] != name:
            roots[name] = roots[roots[name]]
            name = roots[name]
        return name

    chosen: list[Edge] = []
    limit = len(vertices) - 1
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(chosen) >= limit:
            break
        src_root, dest_root = find(edge.src), find(edge.dest)
        if src_root == dest_root:
            continue
        low, high = sorted((src_root, dest_root))
        roots[high] = low
        chosen.append(edge)
    return chosen


def run_kruskal(stdin: TextIO, stdout: TextIO) -> list[Edge]:
    """Read a graph, print it and its minimum spanning tree."""
    graph = create_graph(stdin, stdout, True)
    stdout.write("\nPrinting Adjacency list\n")
    stdout.write(graph.format_adj_list())
    stdout.write("\n")

    tree = kruskal(edges_from_adjacency(graph.adj_lists), graph.vertices)
    listing = "".join(f"({e.weight}, {e.src}, {e.dest}) " for e in tree)
    stdout.write(f"Edges included (weight, src, dest): {listing}")
    stdout.write(f"\nTotal weight of MST: {sum(e.weight for e in tree)}\n")
    return tree