"""Classic algorithms: binary search, bits, string dynamic programming, graphs and word puzzles."""

__version__ = "0.1.0"