"""Classic contest algorithms and data structures: graphs, trees, range queries, DP, strings."""

__version__ = "0.1.0"