"""Classic algorithms and data structures: flood fill, Tower of Hanoi, binary
search, binary trees, Floyd-Warshall, linked lists, merge sort,
shortest-job-first scheduling and subsequences."""

__version__ = "0.1.0"