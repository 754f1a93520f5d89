"""Binary search tree without duplicates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

__all__ = ["BST"]

T = TypeVar("T")


def _format(value: Any) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass(eq=False)
class _Node(Generic[T]):
    data: T
    left: Optional[_Node[T]] = field(default=None, repr=False)
    right: Optional[_Node[T]] = field(default=None, repr=False)


class BST(Generic[T]):
    """Binary search tree; smaller values go left, larger ones right."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> bool:
        """Add ``value``; return False and leave the tree alone if it is a duplicate."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value < node.data:  # type: ignore[operator]
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            elif node.data < value:  # type: ignore[operator]
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right
            else:
                return False

    def _find(self, value: T) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if value < node.data:  # type: ignore[operator]
                parent, node = node, node.left
            elif node.data < value:  # type: ignore[operator]
                parent, node = node, node.right
            else:
                break
        return parent, node

    def _replace_child(
        self, parent: Optional[_Node[T]], old: _Node[T], new: Optional[_Node[T]]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, value: T) -> bool:
        """Remove ``value``; return False if it is not in the tree.

        A node with two children takes the smallest value of its right
        subtree, and that node is removed instead.
        """
        parent, node = self._find(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.data = succ.data
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        return True

    def find_min(self) -> T:
        """Return the smallest value; an empty tree raises ValueError."""
        if self._root is None:
            raise ValueError("Tree is Empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def find_max(self) -> T:
        """Return the largest value; an empty tree raises ValueError."""
        if self._root is None:
            raise ValueError("Tree is Empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    def is_empty(self) -> bool:
        """Return True if the tree holds no values."""
        return self._root is None

    def in_order(self) -> list[T]:
        """Return the values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __contains__(self, value: object) -> bool:
        try:
            return self._find(value)[1] is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._root is not None

    def __copy__(self) -> BST[T]:
        clone = type(self)()
        if self._root is None:
            return clone
        clone._root = _Node(self._root.data)
        pending = [(self._root, clone._root)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                target.left = _Node(source.left.data)
                pending.append((source.left, target.left))
            if source.right is not None:
                target.right = _Node(source.right.data)
                pending.append((source.right, target.right))
        return clone

    def __str__(self) -> str:
        return "".join(f"{_format(value)} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"