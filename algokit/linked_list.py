"""A singly linked list that can be reversed in place."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

_DEMO_PUSHES = (20, 4, 15, 85)


@dataclass(eq=False)
class Node:
    """One link of the list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with insertion at the head."""

    def __init__(self) -> None:
        self.head: Node | None = None

    def push(self, data: Any) -> None:
        """Insert ``data`` at the front of the list."""
        self.head = Node(data, self.head)

    def reverse(self) -> None:
        """Reverse the order of the links in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next


def _render(values: LinkedList) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Build the demonstration list, print it, reverse it and print it again."""
    parser = argparse.ArgumentParser(description="Reverse a sample linked list.")
    parser.parse_args(argv)
    linked = LinkedList()
    for value in _DEMO_PUSHES:
        linked.push(value)
    print("Given linked list")
    print(_render(linked), end="")
    linked.reverse()
    print("\nReversed linked list ")
    print(_render(linked), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())