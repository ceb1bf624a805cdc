"""Classic algorithms and data structures: bits, trees, strings, numerics and solvers."""

__version__ = "0.1.0"