"""Eight-directional flood fill over a rectangular grid of cells."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence, Sequence
from typing import Any

_DIRECTIONS = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

_DEMO_GRID = (
    "WWWLLWWW",
    "WWLLLLWW",
    "WLLLLLLW",
    "WLLLLLLW",
    "WWLLLLWW",
    "WWLLLLWW",
    "WWWLLWWW",
    "WWWWWWWW",
)


def flood_fill(
    grid: MutableSequence[MutableSequence[Any]],
    row: int,
    col: int,
    target: Any,
    replacement: Any,
) -> int:
    """Replace the region of ``target`` cells connected to (row, col) in place.

    Cells are connected through all eight neighbours. Returns the number of
    cells that were filled; a start outside the grid or on another colour
    fills nothing.
    """
    if target == replacement:
        return 0
    filled = 0
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] != target:
            continue
        grid[r][c] = replacement
        filled += 1
        pending.extend((r + dr, c + dc) for dr, dc in _DIRECTIONS)
    return filled


def format_grid(grid: Sequence[Sequence[Any]]) -> str:
    """Render the grid one row per line, each cell followed by a space."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill the demonstration island and print the resulting grid."""
    parser = argparse.ArgumentParser(
        description="Flood fill the demonstration grid from (3, 4), L -> G."
    )
    parser.parse_args(argv)
    grid = [list(line) for line in _DEMO_GRID]
    flood_fill(grid, 3, 4, "L", "G")
    print(format_grid(grid), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())