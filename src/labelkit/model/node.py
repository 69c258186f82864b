"""Node base class: the ownership tree shared by documents, groups and labels."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

T = TypeVar("T")
N = TypeVar("N", bound="Node")


class Node:
    """An entity owned by at most one parent.

    Children are kept in insertion order. Destroying a node destroys
    everything it owns.
    """

    parent: Node | None = None

    @property
    def children(self) -> list[Node]:
        """Child nodes in insertion order."""
        if "_children" not in self.__dict__:
            self._children: list[Node] = []
        return self._children

    def add_child(self, child: N) -> N:
        """Take ownership of a node.

        Args:
            child: Node to attach. It must not already have a parent.

        Returns:
            The attached child, for chaining.

        Raises:
            ValueError: If the child is already owned by another node.
        """
        if child.parent is not None:
            raise ValueError(f"{child!r} already belongs to {child.parent!r}")
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Node) -> None:
        """Detach a child without destroying it."""
        self.children.remove(child)
        child.parent = None

    @property
    def root(self) -> Node:
        """Topmost ancestor (self when detached)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def find_ancestor(self, kind: type[T]) -> T | None:
        """Get the nearest ancestor that is an instance of ``kind``.

        Args:
            kind: Class or capability base class to look for.

        Returns:
            The nearest matching ancestor, or None.
        """
        node = self.parent
        while node is not None:
            if isinstance(node, kind):
                return node
            node = node.parent
        return None

    def walk(self) -> Iterator[Node]:
        """Yield all descendants depth-first, in insertion order."""
        for child in self.children:
            yield child
            yield from child.walk()

    def destroy(self) -> None:
        """Destroy owned nodes and detach from the parent."""
        for child in list(self.children):
            child.destroy()
        if self.parent is not None:
            self.parent.remove_child(self)
