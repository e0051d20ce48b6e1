"""Data structures and algorithms for programming contests: range trees, graphs, strings and number theory."""

__version__ = "0.1.0"