"""Classic algorithms and small data structures: strings, patterns, expressions,
sorting, arrays, matrices, grids, trees, numbers, queues and sets."""

__version__ = "0.1.0"