"""Iterative binary search over a sorted sequence."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

_DEMO_ITEMS = (2, 3, 4, 10, 40)


def binary_search(items: Sequence[Any], value: Any) -> int | None:
    """Return an index of ``value`` in sorted ``items``, or None if it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        probe = items[mid]
        if probe == value:
            return mid
        if probe < value:
            low = mid + 1
        else:
            high = mid - 1
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Search the demonstration array for a value (10 by default)."""
    parser = argparse.ArgumentParser(description="Binary search a sorted array.")
    parser.add_argument("value", nargs="?", type=int, default=10)
    args = parser.parse_args(argv)
    index = binary_search(_DEMO_ITEMS, args.value)
    if index is None:
        print("Element is not present in array")
    else:
        print(f"Element is present at index {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())