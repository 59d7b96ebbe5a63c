"""Tower of Hanoi move generation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence


def hanoi_moves(
    disks: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[tuple[str, str]]:
    """Yield (from, to) peg pairs that move ``disks`` disks from source to target."""
    if disks < 1:
        raise ValueError(f"number of disks must be at least 1, got {disks}")
    return _moves(disks, source, spare, target)


def _moves(disks: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if disks == 1:
        yield source, target
        return
    yield from _moves(disks - 1, source, target, spare)
    yield source, target
    yield from _moves(disks - 1, spare, source, target)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for a number of disks given as argument or read from input."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("disks", nargs="?", help="number of disks")
    args = parser.parse_args(argv)

    raw = args.disks
    if raw is None:
        try:
            raw = input("Enter No of Disk:")
        except EOFError:
            print("no number of disks given", file=sys.stderr)
            return 1
    try:
        moves = hanoi_moves(int(raw))
    except ValueError as error:
        print(f"invalid number of disks: {raw!r} ({error})", file=sys.stderr)
        return 1

    count = 0
    for source, target in moves:
        print(f"{source} -> {target}")
        count += 1
    print(f"No. of Moves:{count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())