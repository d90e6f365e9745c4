"""Greedy feature selection scored by leave-one-out nearest-neighbour accuracy."""

__version__ = "0.1.0"
__all__ = ["__version__"]