"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

INF = 99999
"""Distance marking a pair of vertices with no edge between them."""

_DEMO_GRAPH = (
    (0, 5, INF, 10),
    (INF, 0, 3, INF),
    (INF, INF, 0, 1),
    (INF, INF, INF, 0),
)


def floyd_warshall(dist: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices.

    ``dist`` is a square adjacency matrix using ``INF`` for missing edges; it
    is not modified.
    """
    size = len(dist)
    result = [list(row) for row in dist]
    if any(len(row) != size for row in result):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        via = result[k]
        for row in result:
            through = row[k]
            if through == INF:
                continue
            for j, (direct, onward) in enumerate(zip(row, via)):
                if onward != INF and direct > through + onward:
                    row[j] = through + onward
    return result


def format_matrix(dist: Sequence[Sequence[int]]) -> str:
    """Render the matrix one row per line, writing INF for unreachable pairs."""
    return "".join(
        "".join("INF " if value == INF else f"{value} " for value in row) + "\n"
        for row in dist
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shortest distances of the demonstration graph."""
    parser = argparse.ArgumentParser(description="All-pairs shortest paths demo.")
    parser.parse_args(argv)
    print(
        "The following matrix shows the shortest distances"
        " between every pair of vertices "
    )
    print(format_matrix(floyd_warshall(_DEMO_GRAPH)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())