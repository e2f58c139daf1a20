"""Disjoint-set node: a value plus an optional link to its parent.

A set is represented by a chain of nodes; the node at the end of the chain
(the one without a parent) is the representative of the set. This module
deliberately performs neither path compression nor union by rank, so a
chain built by repeated unions in one direction is as deep as it is long.
Use DisjointSetForest when those optimizations are needed.
"""

import logging
from typing import Generic, Iterator, TypeVar

from union_find.error.exceptions import CyclicStructureError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node(Generic[T]):
    """A single element of a disjoint set.

    Equality is structural: two nodes are equal when their values are equal
    and their parent chains are equal. Two separately created singletons with
    the same value therefore compare equal even though they are distinct sets.
    Wrap values in something unique (or use DisjointSetForest handles) when
    sets must be told apart by identity.

    Attributes:
        value: Payload carried by the node.
    """

    __slots__ = ("value", "_parent")
    __hash__ = None  # mutable, structural equality

    def __init__(self, value: T) -> None:
        self.value = value
        self._parent: Node[T] | None = None

    @classmethod
    def make_set(cls, value: T) -> "Node[T]":
        """Encapsulate `value` in a new singleton set."""
        return cls(value)

    @property
    def parent(self) -> "Node[T] | None":
        """Parent node, or None when this node is the representative."""
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def ancestors(self) -> Iterator["Node[T]"]:
        """Yield every node on the parent chain, nearest first."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def find(self) -> "Node[T]":
        """Return the representative of the set containing this node.

        The whole chain is walked on every call; nothing is compressed.

        Returns:
            A detached copy of the root. Mutating it (for instance by linking
            it under another node) leaves this node's chain untouched; union
            through a node of the chain to merge sets.
        """
        root = self
        for root in self.ancestors():
            pass
        return root.copy()

    def depth(self) -> int:
        """Number of parent dereferences find() performs from this node."""
        return sum(1 for _ in self.ancestors())

    def union(self, other: "Node[T]") -> None:
        """Make `other` a child of this node.

        Note the direction: the argument becomes subordinate to the receiver.
        Neither side is resolved to its root first, so `other` may be a
        non-root node; its previous parent link is replaced.

        Args:
            other: Node to attach under this one.

        Raises:
            CyclicStructureError: If `other` is this node or one of its
                ancestors.
        """
        if other is self or any(node is other for node in self.ancestors()):
            raise CyclicStructureError(
                f"Linking {other.value!r} under {self.value!r} would create a cycle"
            )
        if other._parent is not None:
            logger.debug(
                "Relinking non-root node %r from %r to %r",
                other.value,
                other._parent.value,
                self.value,
            )
        other._parent = self

    def copy(self) -> "Node[T]":
        """Return a structurally equal chain made of new node objects."""
        chain = [self, *self.ancestors()]
        parent: Node[T] | None = None
        for node in reversed(chain):
            clone = Node(node.value)
            clone._parent = parent
            parent = clone
        return parent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        left: Node | None = self
        right: Node | None = other
        while left is not None and right is not None:
            if left is right:
                return True
            if left.value != right.value:
                return False
            left, right = left._parent, right._parent
        return left is None and right is None

    def __repr__(self) -> str:
        text = "None"
        for node in reversed([self, *self.ancestors()]):
            text = f"Node(value={node.value!r}, parent={text})"
        return text


def make_set(value: T) -> Node[T]:
    """Create a new singleton set holding `value`."""
    return Node.make_set(value)


def find(node: Node[T]) -> Node[T]:
    """Return the representative of the set containing `node`."""
    return node.find()


def union(node: Node[T], other: Node[T]) -> None:
    """Attach `other` under `node`; see Node.union."""
    node.union(other)
