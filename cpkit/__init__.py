"""Competitive-programming helpers: number theory, geometry, strings, matrices and debug output."""

__version__ = "0.1.0"
__all__ = ["debugging", "numtheory", "geometry", "strings", "matrix"]