# algodrills

Interactive drills for classic algorithms. You can run them from the terminal
or call them from Python:

- Activity selection: greedy, ordered by end time.
- 0/1 knapsack: bottom-up dynamic programming.
- Fractional knapsack: greedy by value per weight.
- Kruskal's minimum spanning tree.
- Rod cutting: dynamic programming.

## Installation

```
pip install .
```

## Command line

```
algodrills
```

The command shows a menu:

```
(0) Activity Selection
(1) 0/1 Knapsack
(2) Fractional Knapsack
(3) Kruskal Algorithm
(4) Rod Cutting Problem
```

Enter a number, then answer the prompts.

- Enter lists of values space-separated.
- For rod cutting, give one price for each length from 1 up to the rod length.
- For Kruskal's algorithm, give each vertex's outgoing edges as
  `(neighbor, weight)` pairs, for example `(2, 10)(3, 5)`. Spacing does not
  matter. Leave the line empty for a vertex with no outgoing edges.
- Edges to unknown vertices are ignored, and so are self-loops.

A choice that is not on the menu shows the menu again. The command exits with
status 1 and prints a message to standard error in two cases:

- input that is malformed, such as a negative count, a non-numeric value or
  unbalanced parentheses;
- input that ends too early.

The command takes no options apart from `--help`.

## Library use

```python
from algodrills.activity import select_activities
from algodrills.knapsack import Item, knapsack_01_table, chosen_items, fractional_knapsack
from algodrills.rod_cutting import rod_cutting, cut_pieces
from algodrills.graph import Graph, Vertex, parse_adjacency_line, create_graph
from algodrills.kruskal import Edge, edges_from_adjacency, kruskal
```

- `select_activities(activities)` takes `(start, end)` pairs and returns a
  non-conflicting schedule, ordered by end time. An activity that starts
  exactly when another ends counts as a conflict.
- `knapsack_01_table(items, capacity)` builds the dynamic-programming table.
  Values are stored as integers.
- `chosen_items(table, items)` walks the table back and returns the 1-based
  numbers of the items picked, last item first.
- `fractional_knapsack(items, capacity)` returns the `Item` portions placed in
  the bag. Each portion carries the weight taken and the value that weight
  brings. Every weight must be positive.
- `rod_cutting(prices, length)` returns two lists: the best price for each
  length and the first cut for each length.
- `cut_pieces(solution, length)` lists the piece lengths of the best cut.
- `Graph(adj_lists, is_directed)` builds a graph whose vertices are named
  `1..n` from adjacency lists of `(neighbor, weight)` pairs. You can add to it
  with `add_vertex` and `connect_vertices`. `format_adj_list()` and
  `format_adj_matrix()` render it as text.
- `parse_adjacency_line(line)` parses `(neighbor, weight)` text.
- `create_graph(stdin, stdout, is_directed)` reads a graph interactively.
- `edges_from_adjacency(adj_lists)` lists the edges.
- `kruskal(edges, vertices)` returns the edges of a minimum spanning tree, or
  a forest if the graph is not connected, lightest first.

Each drill also has a `run_*` function that takes an input stream and an
output stream, prints its prompts and results, and returns the result:

- `run_activity_selection`
- `run_knapsack_01`
- `run_fractional_knapsack`
- `run_kruskal`
- `run_rod_cutting`

These are the functions the menu calls.

## What it does not do

The drills work only on what is typed in for a single run. Nothing is read
from files or saved between runs. The menu runs one drill and then exits.

## Running the tests

```
pip install .[test]
pytest
```