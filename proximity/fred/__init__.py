"""Fréchet distances and simplification of polygonal curves."""

__version__ = "0.1.0"