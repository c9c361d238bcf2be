"""Vectors, matrices, projections, colours, PCG32 random numbers, a resource registry and small helpers for games."""

__version__ = "0.1.0"