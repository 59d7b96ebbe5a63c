"""Top-down merge sort."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

_DEMO_ITEMS = (12, 11, 13, 5, 6, 7)


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties the element of ``left`` comes first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in stable ascending order."""
    values = list(items)
    if len(values) <= 1:
        return values
    half = (len(values) + 1) // 2
    return merge(merge_sort(values[:half]), merge_sort(values[half:]))


def _render(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given integers, or the demonstration array, and print both."""
    parser = argparse.ArgumentParser(description="Merge sort an array of integers.")
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)
    values = args.values or list(_DEMO_ITEMS)
    print("Given array is ")
    print(_render(values))
    print("\nSorted array is ")
    print(_render(merge_sort(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())