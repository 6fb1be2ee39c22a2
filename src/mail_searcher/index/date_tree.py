"""Binary search tree ordering records by date.

The tree is deliberately left unbalanced. Records whose date compares equal
to a node's date are placed in its right subtree, so an in-order walk returns
equal-date records in the order they were inserted.

Both insertion and traversal are iterative; a sorted input produces a tree as
deep as it is long, which would overflow the interpreter's recursion limit
with a recursive walk.
"""

from __future__ import annotations

from dataclasses import dataclass

from mail_searcher.models import MessageRecord


@dataclass
class _Node:
    record: MessageRecord
    left: _Node | None = None
    right: _Node | None = None


class DateOrderedIndex:
    """Unbalanced BST keyed by the record's date string."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, record: MessageRecord) -> None:
        """Place a record in the tree. Always succeeds."""

        node = _Node(record)
        self._size += 1

        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if record.date < current.record.date:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def to_sorted_sequence(self) -> list[MessageRecord]:
        """Return every record in ascending date order.

        The list is rebuilt on each call, so callers may modify it freely.
        """

        result: list[MessageRecord] = []
        stack: list[_Node] = []
        current = self._root

        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.record)
            current = current.right

        return result

    def _depth(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""

        if self._root is None:
            return 0

        deepest = 0
        pending: list[tuple[_Node, int]] = [(self._root, 1)]
        while pending:
            node, level = pending.pop()
            deepest = max(deepest, level)
            if node.left is not None:
                pending.append((node.left, level + 1))
            if node.right is not None:
                pending.append((node.right, level + 1))
        return deepest

    def __len__(self) -> int:
        return self._size
