"""Functional programming showcase: pure functions, immutability, pattern matching."""

__version__ = "0.1.0"
