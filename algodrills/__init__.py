"""Interactive drills for activity selection, knapsack, Kruskal's MST and rod cutting."""

__version__ = "0.1.0"