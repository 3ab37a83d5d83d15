"""Classic algorithms and small data structures: dynamic programming, arrays, strings, trees, stacks and queues."""

__version__ = "0.1.0"