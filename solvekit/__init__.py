"""Classic algorithm solutions over arrays, strings, grids, linked lists and trees, plus small containers."""

__version__ = "0.1.0"