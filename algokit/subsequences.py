"""Enumeration of all subsequences of a string."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from itertools import compress, product


def subsequences(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, including the empty one.

    Subsequences that keep an earlier character come before those that drop
    it, so the whole string is first and the empty string last. Repeated
    characters give repeated subsequences.
    """
    for keep in product((True, False), repeat=len(text)):
        yield "".join(compress(text, keep))


def main(argv: Sequence[str] | None = None) -> int:
    """Print every subsequence of the given string, one per line."""
    parser = argparse.ArgumentParser(description="List all subsequences of a string.")
    parser.add_argument("text", nargs="?", default="abc")
    args = parser.parse_args(argv)
    for subsequence in subsequences(args.text):
        print(subsequence)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())