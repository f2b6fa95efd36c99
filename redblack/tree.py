"""A red-black tree of integers with insertion, lookup and traversal strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class Color(Enum):
    """Colour of a tree node."""

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2

    @property
    def letter(self) -> str:
        return "B" if self is Color.BLACK else "R"


@dataclass(eq=False)
class RBTNode:
    """A single node of a red-black tree."""

    data: int
    color: Color = Color.RED
    left: Optional[RBTNode] = None
    right: Optional[RBTNode] = None
    parent: Optional[RBTNode] = None

    @property
    def label(self) -> str:
        return f"{self.color.letter}{self.data}"


class EmptyTreeError(RuntimeError):
    """Raised when a value is asked of a tree that holds nothing."""


class RedBlackTree:
    """A red-black binary search tree. Equal values are placed to the right."""

    def __init__(self, data: Optional[int] = None) -> None:
        self.root: Optional[RBTNode] = None
        self._size = 0
        if data is not None:
            self.insert(data)

    # -- copying -----------------------------------------------------------

    def copy(self) -> RedBlackTree:
        """Return an independent copy with the same shape and colours."""
        clone = RedBlackTree()
        clone.root = self._copy_of(self.root)
        clone._size = self._size
        return clone

    def __copy__(self) -> RedBlackTree:
        return self.copy()

    @classmethod
    def _copy_of(cls, node: Optional[RBTNode]) -> Optional[RBTNode]:
        if node is None:
            return None
        new_node = RBTNode(node.data, node.color)
        new_node.left = cls._copy_of(node.left)
        new_node.right = cls._copy_of(node.right)
        for child in (new_node.left, new_node.right):
            if child is not None:
                child.parent = new_node
        return new_node

    # -- queries -----------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in ascending order."""
        stack: list[RBTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def _get(self, data: int) -> Optional[RBTNode]:
        current = self.root
        while current is not None:
            if data == current.data:
                return current
            current = current.left if data < current.data else current.right
        return None

    def contains(self, data: int) -> bool:
        """Return whether the value is stored in the tree."""
        return self._get(data) is not None

    def __contains__(self, data: object) -> bool:
        return isinstance(data, int) and self.contains(data)

    def get_min(self) -> int:
        """Return the smallest value; raise EmptyTreeError if the tree is empty."""
        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def get_max(self) -> int:
        """Return the largest value; raise EmptyTreeError if the tree is empty."""
        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    # -- string forms ------------------------------------------------------

    def to_infix_string(self) -> str:
        """Left, node, right; each node written as ' B<n>' or ' R<n>'."""

        def walk(n: Optional[RBTNode]) -> str:
            if n is None:
                return ""
            return walk(n.left) + " " + n.label + walk(n.right)

        return walk(self.root)

    def to_prefix_string(self) -> str:
        """Node, left, right; each node written as ' B<n> ' or ' R<n> '."""

        def walk(n: Optional[RBTNode]) -> str:
            if n is None:
                return ""
            return f" {n.label} " + walk(n.left) + walk(n.right)

        return walk(self.root)

    def to_postfix_string(self) -> str:
        """Left, right, node; each node written as 'B<n> ' or 'R<n> '."""

        def walk(n: Optional[RBTNode]) -> str:
            if n is None:
                return ""
            return walk(n.left) + walk(n.right) + f"{n.label} "

        return walk(self.root)

    # -- insertion ---------------------------------------------------------

    def insert(self, data: int) -> None:
        """Insert a value, rebalancing as needed."""
        node = RBTNode(data)
        self._basic_insert(node)
        self._insert_fix_up(node)
        self._size += 1

    def _basic_insert(self, node: RBTNode) -> None:
        if self.root is None:
            node.color = Color.BLACK
            self.root = node
            return
        current: Optional[RBTNode] = self.root
        parent = self.root
        while current is not None:
            parent = current
            current = current.left if node.data < current.data else current.right
        node.parent = parent
        if node.data < parent.data:
            parent.left = node
        else:
            parent.right = node

    @staticmethod
    def _is_red(node: Optional[RBTNode]) -> bool:
        return node is not None and node.color is Color.RED

    def _insert_fix_up(self, node: RBTNode) -> None:
        while node is not self.root and node.parent.color is Color.RED:
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if self._is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if self._is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_left(node.parent.parent)
        self.root.color = Color.BLACK

    def _replace_in_parent(self, node: RBTNode, replacement: RBTNode) -> None:
        replacement.parent = node.parent
        if node.parent is None:
            self.root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

    def _rotate_left(self, node: RBTNode) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_in_parent(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBTNode) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_in_parent(node, pivot)
        pivot.right = node
        node.parent = pivot