"""A tree-walking interpreter for a small subset of the Lox language."""

__version__ = "0.1.0"