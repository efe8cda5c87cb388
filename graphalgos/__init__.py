"""Weighted undirected graphs, the containers behind them, and classic graph algorithms."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "datastructures", "graph"]